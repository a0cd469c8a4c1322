"""
Integration tests for the HTTP API, using FastAPI's TestClient with
dependency overrides instead of the startup lifespan.
"""
from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_document_store,
    get_ingestion_pipeline,
    get_llm_client,
    get_rag_service,
)
from chat.llm_clients import GeminiClient
from chat.llm_clients.base import LLMConfig, LLMConnectionError
from chat.rag_service import DEFAULT_FALLBACK_MESSAGE, RAGConfig, RAGService
from config.settings import Settings
from ingestion.pipeline import IngestionPipeline
from ingestion.processor import DocumentProcessor
from store import InMemoryDocumentStore


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def llm_client():
    client = Mock()
    client.provider_name = "gemini"
    client.config = LLMConfig(model_name="gemini-2.0-flash")
    client.generate.return_value = "Generated answer."
    client.is_available.return_value = True
    return client


@pytest.fixture
def app_settings():
    return Settings(GEMINI_API_KEY="test-key")


@pytest.fixture
def client(store, llm_client, app_settings, tmp_path):
    app = create_app(app_settings)
    pipeline = IngestionPipeline(DocumentProcessor(store=store, tmp_dir=str(tmp_path)))
    rag = RAGService(store=store, llm_client=llm_client, config=RAGConfig())

    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_ingestion_pipeline] = lambda: pipeline
    app.dependency_overrides[get_rag_service] = lambda: rag
    app.dependency_overrides[get_llm_client] = lambda: llm_client

    # No context manager: the lifespan (and its real LLM client) is not started
    return TestClient(app)


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "OK", "message": "DocChat backend is running"}


class TestUpload:
    """Tests for POST /api/upload"""

    def test_upload_mixed_batch(self, client, store):
        files = [
            ("files", ("notes.txt", b"Hello   there, world!", "text/plain")),
            ("files", ("logo.svg", b"<svg/>", "image/svg+xml")),
        ]

        response = client.post("/api/upload", files=files)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Files processed successfully"
        assert len(body["files"]) == 2

        processed, failed = body["files"]
        assert processed["filename"] == "notes.txt"
        assert processed["status"] == "processed"
        assert processed["size"] == len(b"Hello   there, world!")
        assert processed["contentLength"] == len("Hello there, world!")
        assert "uploadedAt" in processed
        assert "error" not in processed

        assert failed == {
            "filename": "logo.svg",
            "status": "error",
            "error": "Unsupported file type: .svg",
        }
        assert store.filenames() == ["notes.txt"]

    def test_upload_office_formats(self, client, docx_bytes, xlsx_bytes):
        files = [
            ("files", ("notes.docx", docx_bytes, "application/octet-stream")),
            ("files", ("budget.xlsx", xlsx_bytes, "application/octet-stream")),
        ]

        response = client.post("/api/upload", files=files)

        assert [f["status"] for f in response.json()["files"]] == ["processed", "processed"]

    def test_no_files(self, client):
        response = client.post("/api/upload", data={"note": "x"})

        assert response.status_code == 400
        assert response.json()["detail"] == "No files uploaded"

    def test_file_too_large(self, store, tmp_path):
        """The size limit comes from the settings passed to create_app"""
        app = create_app(Settings(GEMINI_API_KEY="test-key", MAX_UPLOAD_SIZE_MB=0))
        pipeline = IngestionPipeline(DocumentProcessor(store=store, tmp_dir=str(tmp_path)))
        app.dependency_overrides[get_ingestion_pipeline] = lambda: pipeline

        response = TestClient(app).post(
            "/api/upload", files=[("files", ("big.txt", b"x", "text/plain"))]
        )

        assert response.status_code == 413
        assert store.count() == 0


class TestDocuments:
    """Tests for GET /api/documents"""

    def test_lists_metadata_in_upload_order(self, client):
        client.post("/api/upload", files=[
            ("files", ("b.txt", b"second", "text/plain")),
            ("files", ("a.txt", b"first!", "text/plain")),
        ])

        response = client.get("/api/documents")

        assert response.status_code == 200
        documents = response.json()["documents"]
        assert [d["filename"] for d in documents] == ["b.txt", "a.txt"]
        assert set(documents[0]) == {"filename", "size", "uploadedAt", "contentLength"}

    def test_empty(self, client):
        assert client.get("/api/documents").json() == {"documents": []}


class TestChat:
    """Tests for POST /api/chat"""

    def test_chat_with_documents(self, client, llm_client):
        client.post("/api/upload", files=[
            ("files", ("budget.txt", b"Rent is 1200.", "text/plain")),
            ("files", ("notes.txt", b"Meeting Monday.", "text/plain")),
        ])

        response = client.post("/api/chat", json={"message": "What is the rent?"})

        assert response.status_code == 200
        assert response.json() == {
            "response": "Generated answer.",
            "sources": ["budget.txt", "notes.txt"],
        }
        prompt = llm_client.generate.call_args[0][0]
        assert "Rent is 1200." in prompt
        assert "What is the rent?" in prompt

    def test_chat_with_empty_corpus(self, client):
        response = client.post("/api/chat", json={"message": "Hello?"})

        assert response.status_code == 200
        assert response.json()["response"]
        assert response.json()["sources"] == []

    @pytest.mark.parametrize("payload", [{}, {"message": ""}, {"message": "   "}])
    def test_missing_message(self, client, payload):
        response = client.post("/api/chat", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Message is required"

    def test_no_body(self, client):
        response = client.post("/api/chat")

        assert response.status_code == 400

    def test_generation_failure_returns_fallback(self, client, llm_client):
        client.post("/api/upload", files=[("files", ("a.txt", b"alpha", "text/plain"))])
        llm_client.generate.side_effect = LLMConnectionError("unreachable")

        response = client.post("/api/chat", json={"message": "Anything?"})

        assert response.status_code == 200
        assert response.json() == {
            "response": DEFAULT_FALLBACK_MESSAGE,
            "sources": ["a.txt"],
        }

    def test_generation_failure_without_degradation(self, client, store, llm_client):
        llm_client.generate.side_effect = LLMConnectionError("unreachable")
        strict = RAGService(store=store, llm_client=llm_client, config=RAGConfig(degrade_on_error=False))
        client.app.dependency_overrides[get_rag_service] = lambda: strict

        response = client.post("/api/chat", json={"message": "Anything?"})

        assert response.status_code == 502

    @pytest.mark.parametrize("body", [
        {"candidates": [{"content": None}]},
        [{"error": "x"}],
    ])
    def test_malformed_generation_reply_returns_fallback(self, client, store, body):
        """A real client receiving a malformed reply still degrades to the fallback"""
        client.post("/api/upload", files=[("files", ("a.txt", b"alpha", "text/plain"))])
        gemini = GeminiClient(LLMConfig(model_name="gemini-2.0-flash"), api_key="test-key")
        rag = RAGService(store=store, llm_client=gemini)
        client.app.dependency_overrides[get_rag_service] = lambda: rag
        reply = Mock()
        reply.json.return_value = body

        with patch("chat.llm_clients.http.requests.post", return_value=reply):
            response = client.post("/api/chat", json={"message": "Anything?"})

        assert response.status_code == 200
        assert response.json() == {
            "response": DEFAULT_FALLBACK_MESSAGE,
            "sources": ["a.txt"],
        }


class TestChatStatus:

    def test_status(self, client, store):
        client.post("/api/upload", files=[("files", ("a.txt", b"alpha", "text/plain"))])

        response = client.get("/api/chat/status")

        assert response.status_code == 200
        assert response.json() == {
            "provider": "gemini",
            "model": "gemini-2.0-flash",
            "llm_available": True,
            "documents": 1,
        }

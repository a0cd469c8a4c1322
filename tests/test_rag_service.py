"""Tests for RAG service."""
import pytest
from unittest.mock import Mock
from chat.context import ContextAssembler
from chat.rag_service import (
    DEFAULT_FALLBACK_MESSAGE,
    RAGConfig,
    RAGService,
)
from chat.llm_clients.base import LLMConfig, LLMConnectionError, LLMResponseError
from domain.exceptions import ValidationError
from domain.models import Document
from store import InMemoryDocumentStore


class TestRAGConfig:
    """Tests for RAGConfig."""

    def test_default_config(self):
        config = RAGConfig()

        assert "{context}" in config.prompt_template
        assert "{question}" in config.prompt_template
        assert config.fallback_message == DEFAULT_FALLBACK_MESSAGE
        assert config.degrade_on_error is True


class TestContextAssembler:
    """Tests for ContextAssembler."""

    def test_joins_in_insertion_order(self):
        store = InMemoryDocumentStore()
        store.append(Document(filename="a.txt", content="first", size=5))
        store.append(Document(filename="b.txt", content="second", size=6))

        assert ContextAssembler(store).build_context() == "first\n\nsecond"

    def test_empty_store(self):
        assert ContextAssembler(InMemoryDocumentStore()).build_context() == ""


class TestRAGService:
    """Tests for RAGService."""

    @pytest.fixture
    def store(self):
        store = InMemoryDocumentStore()
        store.append(Document(filename="budget.xlsx", content="Rent, 1200", size=100))
        store.append(Document(filename="notes.txt", content="Meeting on Monday.", size=18))
        return store

    @pytest.fixture
    def mock_llm_client(self):
        """Create a mock LLM client."""
        client = Mock()
        client.config = LLMConfig(model_name="gemini-2.0-flash")
        client.generate.return_value = "Rent is 1200."
        return client

    @pytest.fixture
    def rag_service(self, store, mock_llm_client):
        return RAGService(store=store, llm_client=mock_llm_client)

    def test_build_prompt(self, rag_service):
        prompt = rag_service.build_prompt("What is the rent?")

        assert prompt.startswith("Based on these documents:\n\nRent, 1200\n\nMeeting on Monday.")
        assert "Question: What is the rent?" in prompt
        assert "If the information isn't available, say so." in prompt

    @pytest.mark.asyncio
    async def test_answer(self, rag_service, mock_llm_client):
        answer = await rag_service.answer("What is the rent?")

        assert answer.response == "Rent is 1200."
        assert answer.sources == ["budget.xlsx", "notes.txt"]
        assert answer.metadata["fallback"] is False
        assert answer.metadata["num_documents"] == 2

        prompt = mock_llm_client.generate.call_args[0][0]
        assert "Rent, 1200" in prompt
        assert "Meeting on Monday." in prompt
        assert "What is the rent?" in prompt

    @pytest.mark.asyncio
    async def test_sources_are_whole_corpus(self, rag_service, store):
        """Every stored filename is cited, relevant or not"""
        store.append(Document(filename="unrelated.pdf", content="Cats.", size=5))

        answer = await rag_service.answer("What is the rent?")

        assert answer.sources == ["budget.xlsx", "notes.txt", "unrelated.pdf"]

    @pytest.mark.asyncio
    async def test_empty_corpus_still_answers(self, mock_llm_client):
        mock_llm_client.generate.return_value = "I have no documents to look at."
        service = RAGService(store=InMemoryDocumentStore(), llm_client=mock_llm_client)

        answer = await service.answer("Anything?")

        assert answer.response
        assert answer.sources == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        LLMConnectionError("unreachable"),
        LLMResponseError("quota exceeded"),
    ])
    async def test_generation_failure_degrades(self, rag_service, mock_llm_client, error):
        mock_llm_client.generate.side_effect = error

        answer = await rag_service.answer("What is the rent?")

        assert answer.response == DEFAULT_FALLBACK_MESSAGE
        assert answer.sources == ["budget.xlsx", "notes.txt"]
        assert answer.metadata["fallback"] is True
        assert answer.metadata["error"] == str(error)

    @pytest.mark.asyncio
    async def test_generation_failure_propagates_when_not_degrading(self, store, mock_llm_client):
        mock_llm_client.generate.side_effect = LLMConnectionError("unreachable")
        service = RAGService(
            store=store,
            llm_client=mock_llm_client,
            config=RAGConfig(degrade_on_error=False),
        )

        with pytest.raises(LLMConnectionError):
            await service.answer("What is the rent?")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question", [None, "", "   \n"])
    async def test_blank_question_rejected(self, rag_service, mock_llm_client, question):
        with pytest.raises(ValidationError, match="Message is required"):
            await rag_service.answer(question)

        mock_llm_client.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_custom_fallback_message(self, store, mock_llm_client):
        mock_llm_client.generate.side_effect = LLMResponseError("bad")
        service = RAGService(
            store=store,
            llm_client=mock_llm_client,
            config=RAGConfig(fallback_message="Try again later."),
        )

        answer = await service.answer("Hi")

        assert answer.response == "Try again later."

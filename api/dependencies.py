"""
Shared dependencies and application state for the FastAPI server.
The document store, pipeline and RAG service are built once at startup
and injected into the routes.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request

from config.settings import Settings, settings as default_settings
from chat.llm_clients.base import BaseLLMClient, LLMConfig
from chat.llm_clients.factory import create_llm_client
from chat.rag_service import RAGService, RAGConfig
from ingestion.pipeline import IngestionPipeline
from ingestion.processor import DocumentProcessor
from store import BaseDocumentStore, create_document_store

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Global singletons — populated during lifespan startup
# ---------------------------------------------------------------------------

_document_store: Optional[BaseDocumentStore] = None
_ingestion_pipeline: Optional[IngestionPipeline] = None
_rag_service: Optional[RAGService] = None
_llm_client: Optional[BaseLLMClient] = None


def get_document_store() -> BaseDocumentStore:
    """FastAPI dependency: returns the initialized document store."""
    if _document_store is None:
        raise RuntimeError("DocumentStore not initialized. Server may still be starting.")
    return _document_store


def get_ingestion_pipeline() -> IngestionPipeline:
    """FastAPI dependency: returns the initialized IngestionPipeline."""
    if _ingestion_pipeline is None:
        raise RuntimeError("IngestionPipeline not initialized. Server may still be starting.")
    return _ingestion_pipeline


def get_rag_service() -> RAGService:
    """FastAPI dependency: returns the initialized RAGService."""
    if _rag_service is None:
        raise RuntimeError("RAGService not initialized. Server may still be starting.")
    return _rag_service


def get_llm_client() -> BaseLLMClient:
    """FastAPI dependency: returns the initialized LLM client."""
    if _llm_client is None:
        raise RuntimeError("LLM client not initialized. Server may still be starting.")
    return _llm_client


def get_settings(request: Request) -> Settings:
    """FastAPI dependency: returns the settings the app was created with."""
    return getattr(request.app.state, "settings", default_settings)


# ---------------------------------------------------------------------------
# Initialization
# ---------------------------------------------------------------------------

def build_llm_client(cfg: Settings) -> BaseLLMClient:
    """Create the generation client selected by ``LLM_PROVIDER``."""
    provider = cfg.LLM_PROVIDER.lower()
    if provider == "ollama":
        llm_cfg = LLMConfig(
            model_name=cfg.OLLAMA_MODEL,
            timeout=cfg.OLLAMA_TIMEOUT,
            max_tokens=cfg.LLM_MAX_TOKENS,
            temperature=cfg.LLM_TEMPERATURE,
        )
        return create_llm_client(provider, llm_cfg, base_url=cfg.OLLAMA_BASE_URL)

    llm_cfg = LLMConfig(
        model_name=cfg.GEMINI_MODEL,
        timeout=cfg.GEMINI_TIMEOUT,
        max_tokens=cfg.LLM_MAX_TOKENS,
        temperature=cfg.LLM_TEMPERATURE,
    )
    if provider == "gemini" and not cfg.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set — chat will return the fallback answer")
    return create_llm_client(
        provider, llm_cfg, api_key=cfg.GEMINI_API_KEY, base_url=cfg.GEMINI_BASE_URL
    )


def initialize_components(cfg: Optional[Settings] = None) -> None:
    """Initialize all components and store them as module-level singletons.
    Called once during FastAPI lifespan startup.
    """
    global _document_store, _ingestion_pipeline, _rag_service, _llm_client

    cfg = cfg or default_settings
    logger.info("Initializing DocChat components...")

    # 1. Document store
    _document_store = create_document_store(cfg.DOCUMENT_STORE_TYPE)

    # 2. Ingestion pipeline
    processor = DocumentProcessor(
        store=_document_store,
        max_content_length=cfg.MAX_CONTENT_LENGTH,
        tmp_dir=cfg.UPLOAD_TMP_DIR,
    )
    _ingestion_pipeline = IngestionPipeline(processor=processor)
    logger.info("IngestionPipeline ready")

    # 3. LLM client
    _llm_client = build_llm_client(cfg)
    logger.info("LLM client ready: %s", cfg.LLM_PROVIDER)

    # 4. RAGService
    rag_cfg = RAGConfig(
        fallback_message=cfg.RAG_FALLBACK_MESSAGE,
        degrade_on_error=cfg.RAG_DEGRADE_ON_ERROR,
    )
    _rag_service = RAGService(
        store=_document_store,
        llm_client=_llm_client,
        config=rag_cfg,
    )
    logger.info("RAGService ready")
    logger.info("All components initialized successfully")

"""
Chat routes — REST endpoints for asking questions about the documents.

Endpoints
---------
POST /api/chat         — Ask a question and get an answer grounded in the corpus
GET  /api/chat/status  — Report the configured LLM and whether it is reachable
"""
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from api.dependencies import get_document_store, get_llm_client, get_rag_service
from chat.llm_clients.base import BaseLLMClient, GenerationError
from chat.rag_service import RAGService
from domain.exceptions import ValidationError
from store.base import BaseDocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------

class ChatRequest(BaseModel):
    """Request body for POST /api/chat."""
    # Optional here so a missing message is answered with 400, not 422
    message: Optional[str] = Field(default=None, description="User question")

    model_config = {"json_schema_extra": {"example": {"message": "What is the total budget?"}}}


class ChatMessageResponse(BaseModel):
    """Response body for POST /api/chat."""
    response: str
    sources: List[str] = Field(default_factory=list)


class StatusResponse(BaseModel):
    """Response for GET /api/chat/status."""
    provider: str
    model: str
    llm_available: bool
    documents: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "",
    response_model=ChatMessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Ask a question about the uploaded documents",
)
async def chat(
    body: Optional[ChatRequest] = None,
    rag: RAGService = Depends(get_rag_service),
) -> ChatMessageResponse:
    """Send *message* to the chatbot and receive an answer built from every
    stored document. Generation outages produce a fallback answer, not an error.
    """
    try:
        answer = await rag.answer(body.message if body else None)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except GenerationError as exc:
        logger.error("Generation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error generating response: {exc}",
        ) from exc
    except Exception as exc:
        logger.exception("Error generating chat response")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc

    return ChatMessageResponse(response=answer.response, sources=answer.sources)


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Check the LLM and document store status",
)
def get_status(
    llm: BaseLLMClient = Depends(get_llm_client),
    store: BaseDocumentStore = Depends(get_document_store),
) -> StatusResponse:
    """Quick health check: reports which model is configured, whether it is
    reachable and how many documents are loaded.
    """
    return StatusResponse(
        provider=llm.provider_name,
        model=llm.config.model_name,
        llm_available=llm.is_available(),
        documents=store.count(),
    )

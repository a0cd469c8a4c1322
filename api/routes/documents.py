"""
Documents routes — REST endpoints for uploading and listing documents.

Endpoints
---------
POST /api/upload     — Upload one or more files and ingest them
GET  /api/documents  — List ingested documents (metadata only)
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_document_store, get_ingestion_pipeline, get_settings
from config.settings import Settings
from ingestion.pipeline import IngestionPipeline
from ingestion.processor import UploadedFile
from store.base import BaseDocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["documents"])


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class UploadResult(BaseModel):
    """One file's outcome. Processed entries carry metadata, failed ones an error."""
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    size: Optional[int] = None
    uploaded_at: Optional[datetime] = Field(default=None, alias="uploadedAt")
    status: str
    content_length: Optional[int] = Field(default=None, alias="contentLength")
    error: Optional[str] = None


class UploadResponse(BaseModel):
    message: str
    files: List[UploadResult]


class DocumentInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    size: int
    uploaded_at: datetime = Field(alias="uploadedAt")
    content_length: int = Field(alias="contentLength")


class DocumentListResponse(BaseModel):
    documents: List[DocumentInfo]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "/upload",
    response_model=UploadResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Upload documents and add their text to the corpus",
)
async def upload_documents(
    files: Optional[List[UploadFile]] = File(default=None, description="One or more documents"),
    pipeline: IngestionPipeline = Depends(get_ingestion_pipeline),
    cfg: Settings = Depends(get_settings),
) -> UploadResponse:
    """Upload PDF, DOCX, XLSX/XLS or TXT files. Each file is processed on its
    own; per-file failures are reported in the response, not as HTTP errors.
    """
    if not files:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No files uploaded")

    uploads: List[UploadedFile] = []
    for upload in files:
        data = await upload.read()
        filename = upload.filename or "unknown"
        if len(data) > cfg.max_upload_size_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large: {filename} (limit {cfg.MAX_UPLOAD_SIZE_MB} MB)",
            )
        uploads.append(UploadedFile(filename=filename, data=data))

    try:
        batch = await pipeline.process_uploads(uploads)
    except Exception as exc:
        logger.exception("Failed to process upload batch")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc

    return UploadResponse(
        message="Files processed successfully",
        files=[
            UploadResult(
                filename=result.filename,
                size=result.size,
                uploaded_at=result.uploaded_at,
                status=result.status.value,
                content_length=result.content_length,
                error=result.error,
            )
            for result in batch.results
        ],
    )


@router.get(
    "/documents",
    response_model=DocumentListResponse,
    summary="List stored documents in upload order",
)
def list_documents(
    store: BaseDocumentStore = Depends(get_document_store),
) -> DocumentListResponse:
    """Return metadata for every stored document; content is never exposed."""
    return DocumentListResponse(
        documents=[
            DocumentInfo(
                filename=meta.filename,
                size=meta.size,
                uploaded_at=meta.uploaded_at,
                content_length=meta.content_length,
            )
            for meta in store.list_metadata()
        ]
    )

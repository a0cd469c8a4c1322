"""
Ingestion module.

Centralises document loading, normalization and batch ingestion:

  ingestion.loaders     — format detection and extraction adapters (PDF, DOCX, XLSX, TXT)
  ingestion.normalizer  — text cleanup applied to every extracted document
  ingestion.processor   — end-to-end single-upload processing
  ingestion.pipeline    — batch upload pipeline with per-file isolation
"""
from ingestion.loaders import (
    BaseLoader,
    ExtractionError,
    LoaderException,
    UnsupportedFormatError,
    detect_format,
    get_loader,
)
from ingestion.normalizer import normalize_text
from ingestion.processor import (
    DocumentProcessor,
    ProcessingResult,
    UploadedFile,
    spool_upload,
)
from ingestion.pipeline import BatchResult, IngestionPipeline, PipelineException

__all__ = [
    # Loaders
    "BaseLoader",
    "LoaderException",
    "UnsupportedFormatError",
    "ExtractionError",
    "detect_format",
    "get_loader",
    # Normalization
    "normalize_text",
    # Processor
    "DocumentProcessor",
    "ProcessingResult",
    "UploadedFile",
    "spool_upload",
    # Pipeline
    "IngestionPipeline",
    "PipelineException",
    "BatchResult",
]

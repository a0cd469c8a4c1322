"""
Domain models for the DocChat system.
Defines the core entities and their behaviors.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


# Default per-document content cap, in characters
MAX_CONTENT_LENGTH = 5000


class FileFormat(str, Enum):
    """Extraction strategies, one per supported upload format"""
    PDF = "pdf"
    DOCX = "docx"
    XLSX = "xlsx"
    TXT = "txt"


class ProcessingStatus(str, Enum):
    """Outcome of a single file's processing attempt"""
    PROCESSED = "processed"
    ERROR = "error"


@dataclass(frozen=True)
class DocumentMetadata:
    """Public view of a stored document. Never carries the content itself."""
    filename: str
    size: int
    uploaded_at: datetime
    content_length: int


@dataclass(frozen=True)
class Document:
    """
    A normalized, length-capped document held in the corpus.

    Attributes:
        filename: Original name supplied by the uploader
        content: Normalized text, already truncated by the ingestion path
        size: Byte length of the original upload
        uploaded_at: Timestamp assigned at insertion
    """
    filename: str
    content: str
    size: int
    uploaded_at: datetime = field(default_factory=datetime.now)

    @property
    def content_length(self) -> int:
        return len(self.content)

    def metadata(self) -> DocumentMetadata:
        return DocumentMetadata(
            filename=self.filename,
            size=self.size,
            uploaded_at=self.uploaded_at,
            content_length=self.content_length,
        )

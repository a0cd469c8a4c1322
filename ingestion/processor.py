"""
Document processor module.
Runs one uploaded file through the ingestion path:
  detect → spool → extract → normalize → truncate → store
"""
from __future__ import annotations

import asyncio
import logging
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Optional

from domain.models import MAX_CONTENT_LENGTH, Document, FileFormat, ProcessingStatus
from ingestion.loaders.base_loader import BaseLoader
from ingestion.loaders.loader_factory import detect_format, get_loader
from ingestion.normalizer import normalize_text
from store.base import BaseDocumentStore

logger = logging.getLogger(__name__)


@dataclass
class UploadedFile:
    """Raw bytes of one uploaded file, as received by the transport layer"""
    filename: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class ProcessingResult:
    """Outcome of processing a single uploaded file"""
    filename: str
    status: ProcessingStatus
    size: Optional[int] = None
    uploaded_at: Optional[datetime] = None
    content_length: Optional[int] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == ProcessingStatus.PROCESSED

    @classmethod
    def failed(cls, filename: str, error: str) -> "ProcessingResult":
        return cls(filename=filename, status=ProcessingStatus.ERROR, error=error)


@contextmanager
def spool_upload(upload: UploadedFile, tmp_dir: Optional[str] = None) -> Iterator[Path]:
    """
    Write an upload to a private temporary directory and yield its path.

    The directory and everything in it are removed when the block exits,
    whether extraction succeeded or raised.
    """
    with tempfile.TemporaryDirectory(prefix="docchat-", dir=tmp_dir) as workdir:
        # The client-supplied name is untrusted; only its extension is kept
        dest = Path(workdir) / f"upload{Path(upload.filename).suffix.lower()}"
        dest.write_bytes(upload.data)
        yield dest


class DocumentProcessor:
    """
    Turns one uploaded file into a stored Document.

    Uses dependency injection so the store and loader lookup are replaceable.
    """

    def __init__(
        self,
        store: BaseDocumentStore,
        max_content_length: int = MAX_CONTENT_LENGTH,
        tmp_dir: Optional[str] = None,
        loader_factory: Callable[[FileFormat], BaseLoader] = get_loader,
    ):
        if max_content_length <= 0:
            raise ValueError("max_content_length must be greater than 0")

        self.store = store
        self.max_content_length = max_content_length
        self.tmp_dir = tmp_dir
        self.loader_factory = loader_factory

        logger.info(
            f"DocumentProcessor initialized — "
            f"store={store.__class__.__name__}, "
            f"max_content_length={max_content_length}"
        )

    async def process(self, upload: UploadedFile) -> ProcessingResult:
        """
        Process one upload and append it to the store.

        Returns:
            A processed ProcessingResult.

        Raises:
            UnsupportedFormatError: If the extension has no adapter
            ExtractionError: If the adapter fails
        """
        file_format = detect_format(upload.filename)
        loader = self.loader_factory(file_format)

        with spool_upload(upload, self.tmp_dir) as path:
            raw_text = await asyncio.to_thread(loader.load, str(path))

        content = normalize_text(raw_text)[: self.max_content_length]
        document = Document(
            filename=upload.filename,
            content=content,
            size=upload.size,
            uploaded_at=datetime.now(),
        )
        self.store.append(document)

        logger.info(
            "Stored %s as %s (%d bytes → %d chars)",
            upload.filename, file_format.value, upload.size, document.content_length,
        )

        return ProcessingResult(
            filename=document.filename,
            status=ProcessingStatus.PROCESSED,
            size=document.size,
            uploaded_at=document.uploaded_at,
            content_length=document.content_length,
        )

"""
Ingestion pipeline for batch uploads.
Processes every file of a batch independently so one bad file never
stops the others.
"""
from typing import Iterable, List, Optional
from dataclasses import dataclass, field
from datetime import datetime
import logging

from ingestion.loaders.base_loader import LoaderException
from ingestion.processor import DocumentProcessor, ProcessingResult, UploadedFile

logger = logging.getLogger(__name__)


class PipelineException(Exception):
    """Exception raised for pipeline errors"""
    pass


@dataclass
class BatchResult:
    """Result of processing an upload batch, one entry per file in received order"""
    results: List[ProcessingResult] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def total_files(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.total_files - self.successful


class IngestionPipeline:
    """
    Batch processing pipeline for uploaded documents.

    Files are handled sequentially in the order received, so documents are
    appended to the store in that same order.
    """

    def __init__(self, processor: DocumentProcessor):
        """
        Initialize the ingestion pipeline.

        Args:
            processor: DocumentProcessor for handling individual files
        """
        if processor is None:
            raise PipelineException("IngestionPipeline requires a DocumentProcessor")
        self.processor = processor

        logger.info(
            f"IngestionPipeline initialized with "
            f"processor={processor.__class__.__name__}"
        )

    async def process_uploads(self, uploads: Iterable[UploadedFile]) -> BatchResult:
        """
        Process a batch of uploaded files.

        Per-file failures are recorded as error entries; they never abort
        the batch and never undo documents stored for earlier files.

        Args:
            uploads: Files in the order they were received

        Returns:
            BatchResult with one ProcessingResult per file
        """
        uploads = list(uploads)
        logger.info(f"Starting batch processing of {len(uploads)} files")

        batch_result = BatchResult()
        for upload in uploads:
            batch_result.results.append(await self._process_single_file(upload))
        batch_result.completed_at = datetime.now()

        logger.info(
            f"Batch processing completed: "
            f"{batch_result.successful}/{batch_result.total_files} successful, "
            f"{batch_result.failed} failed in "
            f"{(batch_result.completed_at - batch_result.started_at).total_seconds():.2f}s"
        )
        return batch_result

    async def _process_single_file(self, upload: UploadedFile) -> ProcessingResult:
        """
        Process a single file and return its result, never raising.
        """
        try:
            return await self.processor.process(upload)
        except LoaderException as e:
            logger.warning(f"Failed to process {upload.filename}: {e}")
            return ProcessingResult.failed(upload.filename, str(e))
        except Exception as e:
            logger.error(
                f"Unexpected error processing {upload.filename}: {e}",
                exc_info=True
            )
            return ProcessingResult.failed(upload.filename, str(e))

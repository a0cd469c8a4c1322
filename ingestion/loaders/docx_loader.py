"""
Word document loader implementation (.docx).
Returns the raw paragraph text; formatting is discarded.
"""
import logging

from ingestion.loaders.base_loader import BaseLoader, ExtractionError, LoaderException

logger = logging.getLogger(__name__)


class DocxLoader(BaseLoader):
    """
    Loader for Word documents.
    Uses python-docx for text extraction.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        try:
            import docx
            self.docx = docx
        except ImportError:
            raise LoaderException(
                "python-docx is not installed. Install with: pip install python-docx"
            )

    def load(self, file_path: str) -> str:
        """
        Load a .docx document and return its paragraphs, one per line.

        Raises:
            ExtractionError: If the package is corrupt or not a Word document
            FileNotFoundError: If file doesn't exist
        """
        path = self._validate_file(file_path)

        try:
            document = self.docx.Document(str(path))
            content = "\n".join(paragraph.text for paragraph in document.paragraphs)
        except Exception as e:
            logger.error("Failed to read DOCX %s: %s", path.name, e)
            raise ExtractionError(f"DOCX processing error: {e}") from e

        logger.info("Loaded DOCX: %s (%d chars)", path.name, len(content))
        return content

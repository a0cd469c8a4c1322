"""
PDF loader implementation.
Extracts the text of every page of a PDF document.
"""
import logging

from ingestion.loaders.base_loader import BaseLoader, ExtractionError, LoaderException

logger = logging.getLogger(__name__)


class PDFLoader(BaseLoader):
    """
    Loader for PDF documents.
    Uses PyPDF2 for text extraction.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        try:
            import PyPDF2
            self.PyPDF2 = PyPDF2
        except ImportError:
            raise LoaderException(
                "PyPDF2 is not installed. Install with: pip install PyPDF2"
            )

    def load(self, file_path: str) -> str:
        """
        Load a PDF document and concatenate the text of all its pages.

        Raises:
            ExtractionError: If the PDF cannot be parsed
            FileNotFoundError: If file doesn't exist
        """
        path = self._validate_file(file_path)

        try:
            with open(path, "rb") as file:
                pdf_reader = self.PyPDF2.PdfReader(file)
                page_count = len(pdf_reader.pages)
                content = "\n".join(
                    page.extract_text() or "" for page in pdf_reader.pages
                )
        except Exception as e:
            error_msg = f"PDF processing error: {e}"
            logger.error("Failed to read PDF %s: %s", path.name, e)
            raise ExtractionError(error_msg) from e

        logger.info(
            "Loaded PDF: %s (%d chars, %d pages)", path.name, len(content), page_count
        )
        return content

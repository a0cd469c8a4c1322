"""
Loader factory module.
Maps file names to extraction strategies and strategies to loaders.
"""
from pathlib import Path
from typing import Dict, Type
import logging

from domain.models import FileFormat
from ingestion.loaders.base_loader import BaseLoader, UnsupportedFormatError
from ingestion.loaders.docx_loader import DocxLoader
from ingestion.loaders.pdf_loader import PDFLoader
from ingestion.loaders.txt_loader import TxtLoader
from ingestion.loaders.xlsx_loader import XlsxLoader

logger = logging.getLogger(__name__)

EXTENSION_FORMATS: Dict[str, FileFormat] = {
    ".pdf": FileFormat.PDF,
    ".docx": FileFormat.DOCX,
    ".xlsx": FileFormat.XLSX,
    ".xls": FileFormat.XLSX,
    ".txt": FileFormat.TXT,
}

_LOADER_REGISTRY: Dict[FileFormat, Type[BaseLoader]] = {
    FileFormat.PDF: PDFLoader,
    FileFormat.DOCX: DocxLoader,
    FileFormat.XLSX: XlsxLoader,
    FileFormat.TXT: TxtLoader,
}


def detect_format(filename: str) -> FileFormat:
    """
    Resolve the extraction strategy for a file from its extension.

    Args:
        filename: Name (or path) of the uploaded file

    Returns:
        The matching FileFormat

    Raises:
        UnsupportedFormatError: If the extension is not supported
    """
    extension = Path(filename).suffix.lower()
    try:
        return EXTENSION_FORMATS[extension]
    except KeyError:
        raise UnsupportedFormatError(extension) from None


def get_loader(file_format: FileFormat, **kwargs) -> BaseLoader:
    """
    Factory function to get the loader for an extraction strategy.

    Args:
        file_format: Strategy returned by detect_format
        **kwargs: Additional configuration for the loader

    Returns:
        Appropriate BaseLoader instance
    """
    return _LOADER_REGISTRY[file_format](**kwargs)


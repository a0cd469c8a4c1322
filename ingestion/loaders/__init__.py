"""
Loaders subpackage for document ingestion.
Provides one extraction adapter per supported format.
"""
from ingestion.loaders.base_loader import (
    BaseLoader,
    ExtractionError,
    LoaderException,
    UnsupportedFormatError,
)
from ingestion.loaders.docx_loader import DocxLoader
from ingestion.loaders.pdf_loader import PDFLoader
from ingestion.loaders.txt_loader import TxtLoader
from ingestion.loaders.xlsx_loader import XlsxLoader
from ingestion.loaders.loader_factory import detect_format, get_loader

__all__ = [
    "BaseLoader",
    "LoaderException",
    "UnsupportedFormatError",
    "ExtractionError",
    "PDFLoader",
    "DocxLoader",
    "XlsxLoader",
    "TxtLoader",
    "detect_format",
    "get_loader",
]

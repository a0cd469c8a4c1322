"""
Base loader module.
Defines the abstract interface for text extraction adapters.
"""
from abc import ABC, abstractmethod
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


class LoaderException(Exception):
    """Exception raised for document loading errors"""
    pass


class UnsupportedFormatError(LoaderException):
    """Raised when a file extension has no extraction adapter"""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}")


class ExtractionError(LoaderException):
    """Raised when the underlying format parser fails on a file"""
    pass


class BaseLoader(ABC):
    """
    Abstract base class for extraction adapters.
    Each adapter turns one file format into plain text.
    """

    def __init__(self, **kwargs):
        self.config = kwargs

    @abstractmethod
    def load(self, file_path: str) -> str:
        """
        Extract the text of a file.

        Args:
            file_path: Path to the file to load

        Returns:
            Extracted plain text (may be empty)

        Raises:
            ExtractionError: If the underlying parser fails
            FileNotFoundError: If file doesn't exist
        """
        pass

    def _validate_file(self, file_path: str) -> Path:
        """
        Validate that the file exists and is a regular file.

        Raises:
            FileNotFoundError: If file doesn't exist
            LoaderException: If path is not a file
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not path.is_file():
            raise LoaderException(f"Path is not a file: {file_path}")

        return path

"""
Plain-text loader implementation (.txt).
Reads the file directly — no external library needed.
"""
import logging

from ingestion.loaders.base_loader import BaseLoader, ExtractionError

logger = logging.getLogger(__name__)


class TxtLoader(BaseLoader):
    """
    Loader for plain-text documents.
    """

    def __init__(self, encoding: str = "utf-8", **kwargs):
        super().__init__(**kwargs)
        self.encoding = encoding

    def load(self, file_path: str) -> str:
        """
        Read a text file verbatim. Undecodable bytes become U+FFFD.

        Raises:
            ExtractionError: If the file cannot be read
            FileNotFoundError: If the file does not exist.
        """
        path = self._validate_file(file_path)

        try:
            content = path.read_bytes().decode(self.encoding, errors="replace")
        except OSError as exc:
            raise ExtractionError(f"Failed to read text file '{path.name}': {exc}") from exc

        logger.info("TxtLoader: loaded '%s' (%d chars)", path.name, len(content))
        return content

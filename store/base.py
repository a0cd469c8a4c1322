"""
Base module for document store implementations.
Defines the abstract interface for holding the ingested corpus.
"""
from abc import ABC, abstractmethod
from typing import List
import logging

from domain.models import Document, DocumentMetadata

logger = logging.getLogger(__name__)


class BaseDocumentStore(ABC):
    """
    Abstract base class for document stores.

    Stores are append-only and keep insertion order. Content is expected to
    arrive already normalized and truncated; the store never rewrites it.
    """

    @abstractmethod
    def append(self, document: Document) -> None:
        """
        Add a document to the end of the collection.

        Args:
            document: Fully processed document
        """
        pass

    @abstractmethod
    def list_metadata(self) -> List[DocumentMetadata]:
        """
        Metadata for every stored document, in insertion order.

        Returns:
            List of DocumentMetadata (never the content)
        """
        pass

    @abstractmethod
    def all_content(self) -> List[str]:
        """
        Content of every stored document, in insertion order.

        Returns:
            List of content strings
        """
        pass

    def filenames(self) -> List[str]:
        """Filenames of every stored document, in insertion order."""
        return [meta.filename for meta in self.list_metadata()]

    def count(self) -> int:
        """Number of stored documents."""
        return len(self.list_metadata())

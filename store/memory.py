"""
In-process document store.
Lives for the lifetime of the server process; nothing is persisted.
"""
from typing import List
import logging

from domain.models import Document, DocumentMetadata
from store.base import BaseDocumentStore
from store.factory import register_document_store

logger = logging.getLogger(__name__)


@register_document_store("memory")
class InMemoryDocumentStore(BaseDocumentStore):
    """List-backed document store."""

    def __init__(self, **kwargs):
        self._documents: List[Document] = []

    def append(self, document: Document) -> None:
        self._documents.append(document)
        logger.debug(
            "Stored document %s (%d chars); corpus size: %d",
            document.filename, document.content_length, len(self._documents),
        )

    def list_metadata(self) -> List[DocumentMetadata]:
        return [doc.metadata() for doc in self._documents]

    def all_content(self) -> List[str]:
        return [doc.content for doc in self._documents]

    def filenames(self) -> List[str]:
        return [doc.filename for doc in self._documents]

    def count(self) -> int:
        return len(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

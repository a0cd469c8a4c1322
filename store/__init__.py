"""
Document store module: the append-only corpus the chatbot answers from.
"""
from store.base import BaseDocumentStore
from store.factory import (
    create_document_store,
    list_document_stores,
    register_document_store,
)
from store.memory import InMemoryDocumentStore

__all__ = [
    "BaseDocumentStore",
    "InMemoryDocumentStore",
    "create_document_store",
    "list_document_stores",
    "register_document_store",
]

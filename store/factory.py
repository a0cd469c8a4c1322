"""
Document store registry.

Store implementations register themselves under the name used by the
``DOCUMENT_STORE_TYPE`` setting; ``create_document_store`` builds one by name.
"""
from typing import Callable, Dict, List, Type
import logging

from store.base import BaseDocumentStore

logger = logging.getLogger(__name__)

_STORES: Dict[str, Type[BaseDocumentStore]] = {}


def register_document_store(name: str) -> Callable[[Type[BaseDocumentStore]], Type[BaseDocumentStore]]:
    """Class decorator making a store selectable as ``DOCUMENT_STORE_TYPE=<name>``."""
    def decorator(cls: Type[BaseDocumentStore]) -> Type[BaseDocumentStore]:
        if name in _STORES and _STORES[name] is not cls:
            raise ValueError(
                f"Document store type '{name}' is already taken by {_STORES[name].__name__}"
            )
        _STORES[name] = cls
        return cls

    return decorator


def create_document_store(store_type: str = "memory", **kwargs) -> BaseDocumentStore:
    """
    Build the document store configured by ``store_type``.

    Raises:
        ValueError: If no store is registered under that name
    """
    try:
        store_cls = _STORES[store_type]
    except KeyError:
        raise ValueError(
            f"Document store type '{store_type}' not found. "
            f"Available types: {list_document_stores()}"
        ) from None

    logger.info("Using %s for documents", store_cls.__name__)
    return store_cls(**kwargs)


def list_document_stores() -> List[str]:
    return sorted(_STORES)

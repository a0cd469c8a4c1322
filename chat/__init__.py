"""
Chat module: context assembly and document-grounded question answering.
"""
from chat.context import ContextAssembler
from chat.models import ChatResponse
from chat.rag_service import RAGConfig, RAGService

__all__ = [
    "ContextAssembler",
    "ChatResponse",
    "RAGConfig",
    "RAGService",
]

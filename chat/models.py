"""Domain models for chat answers."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class ChatResponse:
    """Response from the RAG service.

    Attributes:
        response: The generated (or fallback) answer text
        sources: Filenames of every document in the corpus when the answer was built
        metadata: Additional response metadata (model, fallback flag, etc.)
    """
    response: str
    sources: List[str] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

"""
Text-generation clients behind a common ``generate(prompt) -> text`` interface.
"""
from chat.llm_clients.base import (
    BaseLLMClient,
    GenerationError,
    LLMConfig,
    LLMConnectionError,
    LLMResponseError,
)
from chat.llm_clients.gemini_client import GeminiClient
from chat.llm_clients.ollama_client import OllamaClient
from chat.llm_clients.factory import create_llm_client, list_llm_providers

__all__ = [
    "BaseLLMClient",
    "GenerationError",
    "LLMConfig",
    "LLMConnectionError",
    "LLMResponseError",
    "GeminiClient",
    "OllamaClient",
    "create_llm_client",
    "list_llm_providers",
]

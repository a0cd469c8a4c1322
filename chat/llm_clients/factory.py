"""
Factory for text-generation clients, keyed by provider name.
"""
from typing import Dict, List, Type
import logging

from chat.llm_clients.base import BaseLLMClient, LLMConfig
from chat.llm_clients.gemini_client import GeminiClient
from chat.llm_clients.ollama_client import OllamaClient

logger = logging.getLogger(__name__)

_LLM_CLIENT_REGISTRY: Dict[str, Type[BaseLLMClient]] = {
    GeminiClient.provider_name: GeminiClient,
    OllamaClient.provider_name: OllamaClient,
}


def create_llm_client(provider: str, config: LLMConfig, **kwargs) -> BaseLLMClient:
    """
    Create an LLM client by provider name.

    Args:
        provider: "gemini" or "ollama"
        config: Model configuration
        **kwargs: Provider-specific arguments (api_key, base_url, ...)

    Returns:
        Configured client instance

    Raises:
        ValueError: If provider is not registered
    """
    provider = provider.lower()
    if provider not in _LLM_CLIENT_REGISTRY:
        raise ValueError(
            f"LLM provider '{provider}' not found. "
            f"Available providers: {list_llm_providers()}"
        )

    client = _LLM_CLIENT_REGISTRY[provider](config, **kwargs)
    logger.info(f"Created LLM client: {provider} ({config.model_name})")
    return client


def list_llm_providers() -> List[str]:
    """Names of all registered LLM providers."""
    return sorted(_LLM_CLIENT_REGISTRY.keys())

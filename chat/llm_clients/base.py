"""Base interface for text-generation clients."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class LLMConfig:
    """Configuration for LLM client.

    Attributes:
        model_name: Name of the model to use
        temperature: Sampling temperature (0-1)
        max_tokens: Maximum tokens in response
        top_p: Nucleus sampling parameter
        timeout: Request timeout in seconds
        additional_params: Additional model-specific parameters
    """
    model_name: str = "gemini-2.0-flash"
    temperature: float = 0.7
    max_tokens: int = 1024
    top_p: float = 0.9
    timeout: int = 60
    additional_params: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.additional_params is None:
            self.additional_params = {}


class GenerationError(Exception):
    """Base exception for text-generation failures."""
    pass


class LLMConnectionError(GenerationError):
    """Exception raised when the generation service cannot be reached."""
    pass


class LLMResponseError(GenerationError):
    """Exception raised when the generation service returns an error."""
    pass


class BaseLLMClient(ABC):
    """Abstract base class for LLM clients.

    The rest of the system only depends on ``generate(prompt) -> text``;
    implementations handle the provider's wire format, HTTP transport and
    error mapping onto GenerationError.
    """

    provider_name: str = "base"

    def __init__(self, config: LLMConfig):
        """Initialize the LLM client.

        Args:
            config: Configuration for the LLM
        """
        self.config = config

    @abstractmethod
    def generate(self, prompt: str, **kwargs) -> str:
        """Generate a completion for a single prompt.

        Args:
            prompt: Full prompt text
            **kwargs: Per-call overrides (temperature, max_tokens, top_p)

        Returns:
            Generated text response

        Raises:
            LLMConnectionError: If the service cannot be reached
            LLMResponseError: If the service returns an error
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the LLM is available and responsive.

        Returns:
            True if LLM is available, False otherwise
        """
        pass

"""Ollama LLM client implementation."""
import requests
from chat.llm_clients.base import (
    BaseLLMClient, LLMConfig, LLMResponseError
)
from chat.llm_clients.http import post_json


class OllamaClient(BaseLLMClient):
    """Client for a local Ollama server.

    The prompt goes to ``/api/chat`` as one user message with streaming off.

    Example usage:
        client = OllamaClient(LLMConfig(model_name="llama3"))
        text = client.generate("Summarise these documents ...")
    """

    provider_name = "ollama"

    def __init__(
        self,
        config: LLMConfig,
        base_url: str = "http://localhost:11434",
        **kwargs
    ):
        super().__init__(config)
        self.base_url = base_url.rstrip('/')
        self.chat_endpoint = f"{self.base_url}/api/chat"
        self.tags_endpoint = f"{self.base_url}/api/tags"

    def generate(self, prompt: str, **kwargs) -> str:
        """Generate a completion for *prompt*.

        Raises:
            LLMConnectionError: If Ollama is not running or times out
            LLMResponseError: If Ollama returns an error or no message
        """
        options = {
            "temperature": kwargs.get("temperature", self.config.temperature),
            "num_predict": kwargs.get("max_tokens", self.config.max_tokens),
            "top_p": kwargs.get("top_p", self.config.top_p),
        }
        options.update(self.config.additional_params or {})

        result = post_json(
            self.chat_endpoint,
            {
                "model": self.config.model_name,
                "messages": [{"role": "user", "content": prompt}],
                "stream": False,
                "options": options,
            },
            service="Ollama",
            timeout=self.config.timeout,
        )

        message = result.get("message")
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise LLMResponseError(f"Unexpected response format: {result}")
        return content

    def is_available(self) -> bool:
        try:
            response = requests.get(self.tags_endpoint, timeout=5)
            return response.status_code == 200
        except (requests.exceptions.RequestException, OSError):
            return False

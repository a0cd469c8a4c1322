"""Google Gemini client implementation (Generative Language REST API)."""
import requests
from typing import Dict, Any
from chat.llm_clients.base import (
    BaseLLMClient, LLMConfig, LLMConnectionError, LLMResponseError
)
from chat.llm_clients.http import post_json


class GeminiClient(BaseLLMClient):
    """Client for Google's Gemini models.

    Calls ``models/{model}:generateContent`` with the API key sent in the
    ``x-goog-api-key`` header.

    Example usage:
        config = LLMConfig(model_name="gemini-2.0-flash")
        client = GeminiClient(config, api_key="...")

        response = client.generate("Summarise these documents ...")
    """

    provider_name = "gemini"
    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        config: LLMConfig,
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        **kwargs
    ):
        """Initialize Gemini client.

        Args:
            config: LLM configuration
            api_key: Generative Language API key
            base_url: Base URL of the REST API (including version)
        """
        super().__init__(config)
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.model_endpoint = f"{self.base_url}/models/{config.model_name}"
        self.generate_endpoint = f"{self.model_endpoint}:generateContent"

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise LLMConnectionError(
                "Gemini API key is not configured. Set GEMINI_API_KEY."
            )
        return {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

    def generate(self, prompt: str, **kwargs) -> str:
        """Generate a response using Gemini.

        Raises:
            LLMConnectionError: If the API key is missing or the API cannot be reached
            LLMResponseError: If the API returns an error or no text
        """
        generation_config = {
            "temperature": kwargs.get("temperature", self.config.temperature),
            "maxOutputTokens": kwargs.get("max_tokens", self.config.max_tokens),
            "topP": kwargs.get("top_p", self.config.top_p),
        }
        generation_config.update(self.config.additional_params or {})

        result = post_json(
            self.generate_endpoint,
            {
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "generationConfig": generation_config,
            },
            service="Gemini",
            timeout=self.config.timeout,
            headers=self._headers(),
        )
        return self._extract_text(result)

    @staticmethod
    def _extract_text(result: Dict[str, Any]) -> str:
        """Join the text parts of the first candidate.

        Raises:
            LLMResponseError: If any level of the payload is missing or malformed
        """
        candidates = result.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            feedback = result.get("promptFeedback", {})
            raise LLMResponseError(
                f"Unexpected response format: no candidates returned ({feedback})"
            )

        candidate = candidates[0] if isinstance(candidates[0], dict) else {}
        content = candidate.get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            parts = []

        texts = [
            part["text"] for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        ]
        if not texts:
            reason = candidate.get("finishReason", "unknown")
            raise LLMResponseError(
                f"Unexpected response format: candidate has no text (finishReason={reason})"
            )
        return "".join(texts)

    def is_available(self) -> bool:
        """Check that the API key is set and the configured model is reachable."""
        if not self.api_key:
            return False
        try:
            response = requests.get(
                self.model_endpoint,
                headers={"x-goog-api-key": self.api_key},
                timeout=5
            )
            return response.status_code == 200
        except (requests.exceptions.RequestException, OSError):
            return False

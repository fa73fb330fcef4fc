"""HTTP client for a local Ollama text-generation service."""

import logging
from typing import Any

import requests

from src.config.settings import Settings
from src.generation.errors import ModelServiceError

logger = logging.getLogger(__name__)


class OllamaClient:
    """Sends a single non-streaming generate request per prompt."""

    def __init__(self, settings: Settings) -> None:
        self.url = settings.ollama_url
        self.model = settings.model_name
        self.timeout = settings.ollama_timeout
        self.options = {
            "temperature": settings.temperature,
            "top_p": settings.top_p,
            "num_predict": settings.num_predict,
        }

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": dict(self.options),
        }

    def generate(self, prompt: str) -> str:
        """
        Run the prompt through the model and return its raw text.

        Args:
            prompt: Instruction text

        Returns:
            The model's completion

        Raises:
            ModelServiceError: On transport failure, a non-2xx status, or a
                body without a text response
        """
        logger.info("Calling Ollama model %s at %s", self.model, self.url)
        try:
            resp = requests.post(
                self.url,
                json=self.build_payload(prompt),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ModelServiceError(f"Ollama request failed: {e}") from e

        if not resp.ok:
            raise ModelServiceError(f"Ollama API error: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise ModelServiceError("Ollama returned a non-JSON body") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not text or not isinstance(text, str):
            raise ModelServiceError("No response from Ollama")

        logger.debug("Ollama response received (%d chars)", len(text))
        return text

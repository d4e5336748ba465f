"""Where: src/music_agent/platform/llm/ollama.py
What: HTTP adapter for the Ollama ``/api/generate`` endpoint.
Why: Keep transport and response-shape checks out of the agent.
"""

from __future__ import annotations

from typing import Any, Final

import requests

from music_agent.config.settings import DEFAULT_MODEL, DEFAULT_REQUEST_TIMEOUT
from music_agent.errors import LLMRequestError, LLMResponseError
from music_agent.platform.logging import logger

_CONNECT_TIMEOUT: Final[float] = 5.0


class OllamaClient:
    """Single-shot, non-streaming Ollama client. Failures are not retried."""

    def __init__(
        self,
        base_url: str,
        model: str = DEFAULT_MODEL,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url: str = base_url.rstrip("/")
        self.model: str = model
        self.timeout: float = timeout
        self._session: requests.Session = session or requests.Session()

    def with_model(self, model: str) -> "OllamaClient":
        """Return a client for ``model`` sharing this client's endpoint and session."""
        return OllamaClient(
            self.base_url, model, timeout=self.timeout, session=self._session
        )

    def provider_name(self) -> str:
        return "Ollama"

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}/api/generate"

    def generate(self, prompt: str) -> str:
        payload: dict[str, Any] = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
        }
        logger.debug("POST %s (model=%s, %d prompt chars)", self.generate_url, self.model, len(prompt))

        try:
            response = self._session.post(
                self.generate_url,
                json=payload,
                timeout=(_CONNECT_TIMEOUT, self.timeout),
            )
        except requests.RequestException as exc:
            raise LLMRequestError(
                f"Failed to connect to Ollama at {self.base_url}. Is Ollama running? Error: {exc}"
            ) from exc

        if not response.ok:
            raise LLMRequestError(
                f"Ollama request failed with status {response.status_code}: {response.text}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMResponseError(f"Failed to parse Ollama response: {exc}") from exc

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise LLMResponseError("Failed to parse Ollama response: missing 'response' text")
        return text


__all__ = ["DEFAULT_MODEL", "OllamaClient"]

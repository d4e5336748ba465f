"""Protocol shared by language model providers."""

from __future__ import annotations

from typing import Protocol


class LLMClient(Protocol):
    """Send a prompt to a model and return its text answer."""

    def generate(self, prompt: str) -> str:
        """Return the model's answer to ``prompt``.

        Raises:
            LLMRequestError: If the provider is unreachable or rejects the request.
            LLMResponseError: If the answer is not in the expected shape.
        """
        ...

    def provider_name(self) -> str:
        ...


__all__ = ["LLMClient"]

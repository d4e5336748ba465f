"""Language model clients.

Every client implements :class:`LLMClient`, so providers can be swapped
without touching the agent.
"""

from .base import LLMClient
from .ollama import DEFAULT_MODEL, OllamaClient

__all__ = ["DEFAULT_MODEL", "LLMClient", "OllamaClient"]

"""Summary: Exception taxonomy shared by the tag, model and suggestion layers.
Why: Let the CLI report any pipeline failure with one handler and a clear cause.
"""

from __future__ import annotations


class AgentError(Exception):
    """Base class for every failure the agent reports to the user."""

    label: str = "Agent error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


class FileAccessError(AgentError):
    """A source file, suggestions artifact or output location is not usable."""

    label = "Failed to read file"


class MetadataParseError(AgentError):
    """Tags or a serialized suggestions report could not be decoded or encoded."""

    label = "Failed to parse metadata"


class LLMRequestError(AgentError):
    """The model endpoint could not be reached or answered with an error status."""

    label = "LLM request failed"


class LLMResponseError(AgentError):
    """The model answered, but not in the expected shape."""

    label = "LLM response invalid"


class ConfigError(AgentError):
    """The configuration file is malformed."""

    label = "Configuration error"


__all__ = [
    "AgentError",
    "ConfigError",
    "FileAccessError",
    "LLMRequestError",
    "LLMResponseError",
    "MetadataParseError",
]

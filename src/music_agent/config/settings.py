"""Summary: Fixed naming constants and runtime defaults for the agent.
Why: Keep directory names, artifact suffixes and model defaults in one place.
"""

from __future__ import annotations

from typing import Final

# Model endpoint defaults ----------------------------------------------------

DEFAULT_OLLAMA_URL: Final[str] = "http://localhost:11434"
DEFAULT_MODEL: Final[str] = "llama3.2"
# Local models can take minutes on a cold start.
DEFAULT_REQUEST_TIMEOUT: Final[float] = 120.0


# Output layout --------------------------------------------------------------

ORIGINALS_DIR_NAME: Final[str] = "originals"
PUBLIC_DIR_NAME: Final[str] = "public"
SUGGESTIONS_DIR_NAME: Final[str] = "suggestions"
UPDATED_DIR_NAME: Final[str] = "updated"

SUGGESTIONS_FILE_SUFFIX: Final[str] = ".suggestions.json"
OUTPUT_EXTENSION: Final[str] = ".mp3"


__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_OLLAMA_URL",
    "DEFAULT_REQUEST_TIMEOUT",
    "ORIGINALS_DIR_NAME",
    "OUTPUT_EXTENSION",
    "PUBLIC_DIR_NAME",
    "SUGGESTIONS_DIR_NAME",
    "SUGGESTIONS_FILE_SUFFIX",
    "UPDATED_DIR_NAME",
]

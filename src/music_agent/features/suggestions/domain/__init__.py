"""Domain types for model-proposed metadata edits."""

from .models import (
    CONFIDENCE_LEVELS,
    DEFAULT_CONFIDENCE,
    KNOWN_FIELDS,
    MetadataSuggestion,
    SuggestionsReport,
)

__all__ = [
    "CONFIDENCE_LEVELS",
    "DEFAULT_CONFIDENCE",
    "KNOWN_FIELDS",
    "MetadataSuggestion",
    "SuggestionsReport",
]

"""Suggestion pipeline: parse model text, persist reports, replay edits."""

from .domain import MetadataSuggestion, SuggestionsReport
from .usecases.apply import apply_suggestions
from .usecases.parser import NO_SUGGESTIONS_SENTINEL, parse_suggestions
from .usecases.persistence import load_report, save_report, suggestions_path_for

__all__ = [
    "NO_SUGGESTIONS_SENTINEL",
    "MetadataSuggestion",
    "SuggestionsReport",
    "apply_suggestions",
    "load_report",
    "parse_suggestions",
    "save_report",
    "suggestions_path_for",
]

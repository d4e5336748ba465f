"""Summary: Extract field edits from free-form model output using a block convention.
Why: Model text is unreliable, so extraction degrades to fewer edits instead of failing.

Expected convention, blocks separated by ``---``::

    SUGGESTION: title
    CURRENT: None
    SUGGESTED: Friend of the Devil
    CONFIDENCE: High
    REASON: tag missing
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from music_agent.platform.logging import logger
from music_agent.shared.track_metadata import TrackMetadata

from ..domain.models import DEFAULT_CONFIDENCE, MetadataSuggestion

NO_SUGGESTIONS_SENTINEL: Final[str] = "NO_SUGGESTIONS_NEEDED"
BLOCK_SEPARATOR: Final[str] = "---"
BLOCK_MARKER: Final[str] = "SUGGESTION:"


@dataclass
class _BlockState:
    """Values collected while scanning one block."""

    field: str = ""
    current_value: str | None = None
    suggested_value: str = ""
    confidence: str = DEFAULT_CONFIDENCE
    reason: str = ""

    def to_suggestion(self) -> MetadataSuggestion | None:
        if not self.field or not self.suggested_value:
            return None
        return MetadataSuggestion(
            field=self.field,
            current_value=self.current_value,
            suggested_value=self.suggested_value,
            confidence=self.confidence,
            reason=self.reason,
        )


def _set_field(state: _BlockState, value: str) -> None:
    state.field = value


def _set_current(state: _BlockState, value: str) -> None:
    state.current_value = None if value in {"", "None"} else value


def _set_suggested(state: _BlockState, value: str) -> None:
    state.suggested_value = value


def _set_confidence(state: _BlockState, value: str) -> None:
    state.confidence = value


def _set_reason(state: _BlockState, value: str) -> None:
    state.reason = value


# Transitions keyed by line prefix. Prefixes are mutually exclusive.
_TRANSITIONS: Final[tuple[tuple[str, Callable[[_BlockState, str], None]], ...]] = (
    ("SUGGESTION:", _set_field),
    ("CURRENT:", _set_current),
    ("SUGGESTED:", _set_suggested),
    ("CONFIDENCE:", _set_confidence),
    ("REASON:", _set_reason),
)


def parse_block(block: str) -> MetadataSuggestion | None:
    """Scan one block line by line and return its edit, if complete."""

    state = _BlockState()
    for raw_line in block.splitlines():
        line = raw_line.strip()
        for prefix, transition in _TRANSITIONS:
            if line.startswith(prefix):
                transition(state, line[len(prefix):].strip())
                break
    return state.to_suggestion()


def parse_suggestions(model_text: str, context: TrackMetadata | None = None) -> list[MetadataSuggestion]:
    """Turn model output into an ordered list of field edits.

    Args:
        model_text: Raw text returned by the model.
        context: Metadata the model was asked about. Accepted for callers that
            have it at hand; extraction does not depend on it.

    Returns:
        list[MetadataSuggestion]: Edits in the order their blocks appear.
        Incomplete blocks are dropped and duplicates for a field are kept.
    """
    del context

    if NO_SUGGESTIONS_SENTINEL in model_text:
        logger.debug("Model reported that no suggestions are needed")
        return []

    suggestions: list[MetadataSuggestion] = []
    dropped = 0
    for block in model_text.split(BLOCK_SEPARATOR):
        stripped = block.strip()
        if not stripped or BLOCK_MARKER not in stripped:
            continue
        suggestion = parse_block(stripped)
        if suggestion is None:
            dropped += 1
            continue
        suggestions.append(suggestion)

    if dropped:
        logger.debug("Dropped %d incomplete suggestion block(s)", dropped)
    return suggestions


__all__ = ["BLOCK_SEPARATOR", "NO_SUGGESTIONS_SENTINEL", "parse_block", "parse_suggestions"]

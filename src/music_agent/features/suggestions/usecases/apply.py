"""Summary: Replay a report's edits onto its metadata snapshot.
Why: Produce the record to write without touching the report or the source file.
"""

from __future__ import annotations

import dataclasses
import re
from typing import Final

from music_agent.shared.track_metadata import TrackMetadata

from ..domain.models import SuggestionsReport

_STRING_FIELDS: Final[frozenset[str]] = frozenset(
    {"artist", "title", "album", "genre", "album_artist"}
)
_SIGNED_INT: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")


def _parse_int(value: str, pattern: re.Pattern[str]) -> int | None:
    """Strict decimal parse: no whitespace, no ``_`` separators."""
    if pattern.fullmatch(value) is None:
        return None
    return int(value)


def apply_suggestions(report: SuggestionsReport) -> TrackMetadata:
    """Return the snapshot with every applicable edit replayed in order.

    Later edits for the same field win. Numeric edits that do not parse,
    and edits for unknown fields, are skipped.
    """

    changes: dict[str, str | int] = {}
    for suggestion in report.suggestions:
        name = suggestion.field
        value = suggestion.suggested_value
        if name in _STRING_FIELDS:
            changes[name] = value
        elif name == "year":
            year = _parse_int(value, _SIGNED_INT)
            if year is not None:
                changes["year"] = year
        elif name == "track_number":
            track = _parse_int(value, _UNSIGNED_INT)
            if track is not None:
                changes["track_number"] = track

    return dataclasses.replace(report.current_metadata, **changes)


__all__ = ["apply_suggestions"]

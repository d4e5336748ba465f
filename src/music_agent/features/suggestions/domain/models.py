"""Summary: Field edits and the suggestions report bundling them with a metadata snapshot.
Why: Give the parser, persistence and apply steps one serializable value to share.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from datetime import datetime
from typing import Any, Final

from music_agent.errors import MetadataParseError
from music_agent.shared.track_metadata import TrackMetadata

# Fields the model is asked about. The parser records other names as well.
KNOWN_FIELDS: Final[tuple[str, ...]] = (
    "artist",
    "title",
    "album",
    "year",
    "genre",
    "album_artist",
    "track_number",
)

CONFIDENCE_LEVELS: Final[tuple[str, ...]] = ("High", "Medium", "Low")
DEFAULT_CONFIDENCE: Final[str] = "Medium"


@dataclass(frozen=True)
class MetadataSuggestion:
    """One proposed change to a single metadata field."""

    field: str
    current_value: str | None
    suggested_value: str
    confidence: str = DEFAULT_CONFIDENCE
    reason: str = ""


@dataclass
class SuggestionsReport:
    """Metadata snapshot, the edits proposed for it, and the raw model text."""

    file_path: str
    timestamp: str
    current_metadata: TrackMetadata
    suggestions: list[MetadataSuggestion] = field(default_factory=list)
    llm_analysis: str = ""
    should_apply: bool = False

    @classmethod
    def create(
        cls,
        file_path: str,
        current_metadata: TrackMetadata,
        suggestions: list[MetadataSuggestion],
        llm_analysis: str,
    ) -> "SuggestionsReport":
        """Build a report stamped with the current local time."""
        return cls(
            file_path=file_path,
            timestamp=datetime.now().astimezone().isoformat(),
            current_metadata=current_metadata,
            suggestions=list(suggestions),
            llm_analysis=llm_analysis,
            should_apply=False,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return JSON-ready data with every attribute verbatim."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: object) -> "SuggestionsReport":
        """Rebuild a report from :meth:`to_dict` output.

        Raises:
            MetadataParseError: If the structure or a value type is wrong.
        """
        payload = _expect_mapping(data, "report")
        raw_suggestions = payload.get("suggestions")
        if not isinstance(raw_suggestions, list):
            raise MetadataParseError("'suggestions' must be a list")

        return cls(
            file_path=_expect_str(payload, "file_path"),
            timestamp=_expect_str(payload, "timestamp"),
            current_metadata=_metadata_from_dict(
                _expect_mapping(payload.get("current_metadata"), "current_metadata")
            ),
            suggestions=[_suggestion_from_dict(item) for item in raw_suggestions],
            llm_analysis=_expect_str(payload, "llm_analysis"),
            should_apply=_expect_bool(payload, "should_apply"),
        )


def _expect_mapping(value: object, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MetadataParseError(f"'{where}' must be an object")
    return value


def _expect_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise MetadataParseError(f"'{key}' must be a string")
    return value


def _expect_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if not isinstance(value, bool):
        raise MetadataParseError(f"'{key}' must be a boolean")
    return value


def _expect_optional(data: dict[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass; keep it out of numeric fields.
    if not isinstance(value, kind) or isinstance(value, bool):
        raise MetadataParseError(f"'{key}' must be {kind.__name__} or null")
    return value


def _metadata_from_dict(data: dict[str, Any]) -> TrackMetadata:
    values: dict[str, Any] = {"file_path": _expect_str(data, "file_path")}
    for f in fields(TrackMetadata):
        if f.name == "file_path":
            continue
        kind = int if f.name in {"year", "track_number", "duration_seconds"} else str
        values[f.name] = _expect_optional(data, f.name, kind)
    return TrackMetadata(**values)


def _suggestion_from_dict(item: object) -> MetadataSuggestion:
    data = _expect_mapping(item, "suggestion")
    return MetadataSuggestion(
        field=_expect_str(data, "field"),
        current_value=_expect_optional(data, "current_value", str),
        suggested_value=_expect_str(data, "suggested_value"),
        confidence=_expect_str(data, "confidence"),
        reason=_expect_str(data, "reason"),
    )

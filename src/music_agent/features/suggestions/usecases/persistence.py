"""Summary: Save and load suggestion reports as pretty-printed JSON artifacts.
Why: A later apply run needs the snapshot and edits without re-reading the source tags.

Unlike updated copies, a repeated save for the same source overwrites the
previous artifact.
"""

from __future__ import annotations

import json
from pathlib import Path

from music_agent.config.settings import SUGGESTIONS_DIR_NAME, SUGGESTIONS_FILE_SUFFIX
from music_agent.errors import MetadataParseError
from music_agent.features.path import derive_sibling_directory
from music_agent.platform.filesystem import ensure_directory, read_text_file, write_text_file
from music_agent.platform.logging import logger

from ..domain.models import SuggestionsReport


def suggestions_path_for(source: Path | str) -> Path:
    """Where the suggestions artifact for ``source`` lives. Pure."""

    directory = derive_sibling_directory(source, SUGGESTIONS_DIR_NAME)
    return directory / f"{Path(source).stem}{SUGGESTIONS_FILE_SUFFIX}"


def dumps_report(report: SuggestionsReport) -> str:
    """Serialize a report to JSON text."""

    try:
        return json.dumps(report.to_dict(), indent=2)
    except (TypeError, ValueError) as exc:
        raise MetadataParseError(f"Failed to serialize suggestions: {exc}") from exc


def loads_report(text: str) -> SuggestionsReport:
    """Deserialize a report from JSON text."""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataParseError(f"Failed to parse suggestions: {exc}") from exc
    return SuggestionsReport.from_dict(data)


def save_report(report: SuggestionsReport) -> Path:
    """Write ``report`` next to its source file and return the artifact path.

    Raises:
        FileAccessError: If the directory or file cannot be written.
        MetadataParseError: If the report cannot be serialized.
    """

    target = suggestions_path_for(report.file_path)
    _ = ensure_directory(target.parent)
    write_text_file(target, dumps_report(report))
    logger.debug(
        "Suggestions saved to %s",
        target,
        extra={"agent_event": "agent.suggestions.saved", "path": str(target)},
    )
    return target


def load_report(path: Path | str) -> SuggestionsReport:
    """Read a suggestions artifact written by :func:`save_report`.

    Raises:
        FileAccessError: If the file is missing or unreadable.
        MetadataParseError: If the content is not a valid report.
    """

    source = Path(path)
    report = loads_report(read_text_file(source))
    logger.info(
        "Loaded %d suggestion(s) from %s",
        len(report.suggestions),
        source,
        extra={
            "agent_event": "agent.suggestions.loaded",
            "path": str(source),
            "count": len(report.suggestions),
        },
    )
    return report


__all__ = [
    "dumps_report",
    "load_report",
    "loads_report",
    "save_report",
    "suggestions_path_for",
]

"""Summary: Load a suggestions artifact, replay its edits and write an updated copy.
Why: Apply runs separately from generation and only needs the saved artifact.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import final

from music_agent.features.suggestions import SuggestionsReport, apply_suggestions, load_report
from music_agent.platform.tags import write_metadata_safely
from music_agent.shared.track_metadata import TrackMetadata

MetadataWriter = Callable[[Path | str, TrackMetadata], Path]


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of applying a suggestions artifact."""

    report: SuggestionsReport
    updated_metadata: TrackMetadata
    output_path: Path


@final
class ApplySuggestionsService:
    """Replay saved edits onto a fresh copy of the report's source file."""

    def __init__(
        self,
        *,
        loader: Callable[[Path | str], SuggestionsReport] | None = None,
        writer: MetadataWriter | None = None,
    ) -> None:
        self._loader = loader or load_report
        self._writer = writer or write_metadata_safely

    def apply_report(self, report: SuggestionsReport) -> ApplyResult:
        updated = apply_suggestions(report)
        output_path = self._writer(report.file_path, updated)
        return ApplyResult(report=report, updated_metadata=updated, output_path=output_path)

    def apply_from_file(self, suggestions_file: Path | str) -> ApplyResult:
        """Load ``suggestions_file`` and apply it.

        Raises:
            FileAccessError: If the artifact or source file is unusable.
            MetadataParseError: If the artifact or tag cannot be decoded/written.
        """
        return self.apply_report(self._loader(suggestions_file))


__all__ = ["ApplyResult", "ApplySuggestionsService", "MetadataWriter"]

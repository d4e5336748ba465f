"""Application service that asks a language model about a track's metadata.

The workflow is observe (render the metadata into a prompt), think (send the
prompt to the model) and report (wrap the answer in a result object). Model
errors propagate unchanged; nothing here retries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from music_agent.features.suggestions import SuggestionsReport, parse_suggestions
from music_agent.features.suggestions.usecases.prompts import (
    build_analysis_prompt,
    build_suggestion_prompt,
)
from music_agent.platform.llm import LLMClient
from music_agent.platform.logging import logger
from music_agent.shared.track_metadata import TrackMetadata


@dataclass(frozen=True)
class AnalysisReport:
    """Free-form model critique of one track.

    Attributes:
        metadata: Metadata the model was shown.
        analysis: Model answer, verbatim.
        has_issues: True when artist or title is missing.
    """

    metadata: TrackMetadata
    analysis: str
    has_issues: bool


@final
class MusicAgent:
    """Observe, think, report over a single track."""

    def __init__(self, llm: LLMClient) -> None:
        self.llm: LLMClient = llm

    def analyze_track(self, metadata: TrackMetadata) -> AnalysisReport:
        """Ask the model for a free-form assessment of ``metadata``."""

        answer = self._think(build_analysis_prompt(metadata))
        return AnalysisReport(
            metadata=metadata,
            analysis=answer,
            has_issues=metadata.has_missing_critical_fields(),
        )

    def suggest_corrections(self, metadata: TrackMetadata) -> SuggestionsReport:
        """Ask the model for field-level corrections and parse them into a report."""

        answer = self._think(build_suggestion_prompt(metadata))
        suggestions = parse_suggestions(answer, metadata)
        logger.info(
            "Parsed %d suggestion(s)",
            len(suggestions),
            extra={"agent_event": "agent.suggestions.parsed", "count": len(suggestions)},
        )
        return SuggestionsReport.create(
            file_path=metadata.file_path,
            current_metadata=metadata,
            suggestions=suggestions,
            llm_analysis=answer,
        )

    def _think(self, prompt: str) -> str:
        provider = self.llm.provider_name()
        logger.info(
            "Analyzing track with %s",
            provider,
            extra={
                "agent_event": "agent.llm.request",
                "provider": provider,
                "model": getattr(self.llm, "model", None),
            },
        )
        answer = self.llm.generate(prompt)
        logger.debug(
            "Model answered with %d characters",
            len(answer),
            extra={"agent_event": "agent.llm.response", "chars": len(answer)},
        )
        return answer


__all__ = ["AnalysisReport", "MusicAgent"]

"""Prompt templates for the analysis and suggestion requests."""

from __future__ import annotations

from typing import Final

from music_agent.shared.track_metadata import TrackMetadata

from ..domain.models import CONFIDENCE_LEVELS, KNOWN_FIELDS
from .parser import BLOCK_SEPARATOR, NO_SUGGESTIONS_SENTINEL

ANALYSIS_SYSTEM_PROMPT: Final[str] = """You are a music metadata expert. Analyze the provided MP3 file metadata and provide:

1. **Assessment**: Evaluate the quality and completeness of the metadata
2. **Issues**: Identify any missing, incorrect, or suspicious data
3. **Suggestions**: Recommend specific corrections or improvements
4. **Confidence**: Rate your confidence in the current metadata (Low/Medium/High)

Be concise but thorough. Focus on actionable insights."""


SUGGESTION_SYSTEM_PROMPT: Final[str] = f"""You are a music metadata expert. Review the provided MP3 file metadata and propose corrections for missing or wrong fields.

Answer ONLY with suggestion blocks in exactly this format, one block per field, each block followed by a line containing {BLOCK_SEPARATOR}:

SUGGESTION: <field name>
CURRENT: <current value, or None if missing>
SUGGESTED: <new value>
CONFIDENCE: <{'|'.join(CONFIDENCE_LEVELS)}>
REASON: <one short sentence>
{BLOCK_SEPARATOR}

Allowed field names: {', '.join(KNOWN_FIELDS)}.
Use a four digit number for year and a plain number for track_number.
If the metadata is already complete and correct, answer with {NO_SUGGESTIONS_SENTINEL} and nothing else."""


def build_analysis_prompt(metadata: TrackMetadata) -> str:
    return f"{ANALYSIS_SYSTEM_PROMPT}\n\n{metadata.to_prompt_format()}"


def build_suggestion_prompt(metadata: TrackMetadata) -> str:
    return f"{SUGGESTION_SYSTEM_PROMPT}\n\n{metadata.to_prompt_format()}"


__all__ = [
    "ANALYSIS_SYSTEM_PROMPT",
    "SUGGESTION_SYSTEM_PROMPT",
    "build_analysis_prompt",
    "build_suggestion_prompt",
]

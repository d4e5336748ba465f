"""Application services orchestrating reading, model calls and writing."""

from .agent_service import AnalysisReport, MusicAgent
from .apply_service import ApplyResult, ApplySuggestionsService

__all__ = ["AnalysisReport", "ApplyResult", "ApplySuggestionsService", "MusicAgent"]

"""Console rendering for CLI results."""

from .report import ReportDisplay

__all__ = ["ReportDisplay"]

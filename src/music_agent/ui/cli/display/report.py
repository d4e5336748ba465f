"""src/music_agent/ui/cli/display/report.py
What: Render analysis and suggestion reports on the console.
Why: Keep console formatting out of commands and services.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from music_agent import __version__
from music_agent.application.services import AnalysisReport, ApplyResult
from music_agent.features.suggestions import SuggestionsReport

RULE_WIDTH = 62
SUMMARY_LINES = 3


@final
class ReportDisplay:
    """Handles report display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_banner(self, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"[bold]🎵 Music Library Agent v{__version__}[/bold]")
        self.console.print("=" * RULE_WIDTH)

    def show_analysis(self, report: AnalysisReport, *, quiet: bool = False) -> None:
        """Print the metadata summary and the model's critique."""
        if quiet:
            return

        self.console.print("\n" + "=" * RULE_WIDTH)
        self.console.print("[bold]📊 ANALYSIS REPORT[/bold]")
        self.console.print("=" * RULE_WIDTH + "\n")
        self.console.print(escape(report.metadata.summary()) + "\n")

        self.console.print("🤖 AI Analysis:")
        self.console.print("-" * RULE_WIDTH)
        self.console.print(escape(report.analysis))
        self.console.print("-" * RULE_WIDTH + "\n")

        if report.has_issues:
            self.console.print("[yellow]⚠️  Issues detected - review suggestions above[/yellow]")
        else:
            self.console.print("[green]✅ Metadata appears complete[/green]")

    def show_suggestions(self, report: SuggestionsReport, *, quiet: bool = False) -> None:
        """Print each suggestion and the first lines of the model's answer."""
        if quiet:
            return

        self.console.print("\n" + "=" * RULE_WIDTH)
        self.console.print("[bold]💡 SUGGESTED CHANGES[/bold]")
        self.console.print("=" * RULE_WIDTH)

        if not report.suggestions:
            self.console.print("[green]✅ No changes suggested - metadata looks good![/green]")
            return

        for index, suggestion in enumerate(report.suggestions, start=1):
            current = "(missing)" if suggestion.current_value is None else suggestion.current_value
            self.console.print(
                f"\n{index}. [bold]{escape(suggestion.field.upper())}[/bold] "
                f"(Confidence: {escape(suggestion.confidence)})"
            )
            self.console.print(f"   Current:   {escape(current)}")
            self.console.print(f"   Suggested: {escape(suggestion.suggested_value)}")
            self.console.print(f"   Reason:    {escape(suggestion.reason)}")

        self.console.print("\n" + "-" * RULE_WIDTH)
        self.console.print("📝 LLM Analysis Summary:")
        summary = "\n".join(report.llm_analysis.splitlines()[:SUMMARY_LINES])
        self.console.print(escape(summary))

    def show_saved(self, path: str, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"\n💾 Suggestions saved to: {escape(path)}")
        self.console.print(f"   Apply them with: music-agent --apply {escape(path)}")

    def show_applied(self, result: ApplyResult, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print("\n[bold]Updated metadata:[/bold]")
        self.console.print(escape(result.updated_metadata.summary()))
        self.console.print(f"\n[green]✅ Updated copy written to: {escape(str(result.output_path))}[/green]")
        self.console.print(f"   Original left untouched: {escape(result.report.file_path)}")


__all__ = ["ReportDisplay"]

"""src/music_agent/ui/cli/commands/analyze.py
What: Read a track's tags and print the model's free-form critique.
Why: Default mode; nothing is written to disk.
"""

from typing import override

from music_agent.application.services import AnalysisReport
from music_agent.platform.tags import read_metadata
from music_agent.ui.cli.commands.executor import CommandExecutor


class AnalyzeCommand(CommandExecutor):
    """Command for analyzing a single file."""

    @override
    def execute(self) -> AnalysisReport:
        self.display.show_banner(quiet=self.args.quiet)
        metadata = read_metadata(self.args.file)
        report = self.build_agent().analyze_track(metadata)
        self.display.show_analysis(report, quiet=self.args.quiet)
        return report

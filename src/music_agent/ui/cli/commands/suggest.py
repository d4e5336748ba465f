"""src/music_agent/ui/cli/commands/suggest.py
What: Ask the model for field corrections and save them as a suggestions artifact.
Why: Let users review edits before a separate apply run.
"""

from pathlib import Path
from typing import override

from music_agent.features.suggestions import save_report
from music_agent.platform.tags import read_metadata
from music_agent.ui.cli.commands.executor import CommandExecutor


class SuggestCommand(CommandExecutor):
    """Command for generating and saving suggestions."""

    @override
    def execute(self) -> Path:
        """Returns the path of the saved suggestions artifact."""
        self.display.show_banner(quiet=self.args.quiet)
        metadata = read_metadata(self.args.file)
        report = self.build_agent().suggest_corrections(metadata)
        self.display.show_suggestions(report, quiet=self.args.quiet)
        saved_path = save_report(report)
        self.display.show_saved(str(saved_path), quiet=self.args.quiet)
        return saved_path

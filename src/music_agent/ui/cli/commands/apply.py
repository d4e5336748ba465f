"""src/music_agent/ui/cli/commands/apply.py
What: Apply a saved suggestions artifact to a new copy of its source file.
Why: Materialize reviewed edits without touching the original or calling the model.
"""

from typing import override

from music_agent.application.services import ApplyResult, ApplySuggestionsService
from music_agent.ui.cli.args.options import AgentArgs
from music_agent.ui.cli.commands.executor import CommandExecutor
from music_agent.ui.cli.display import ReportDisplay


class ApplyCommand(CommandExecutor):
    """Command for applying a suggestions file."""

    def __init__(
        self,
        args: AgentArgs,
        *,
        service: ApplySuggestionsService | None = None,
        display: ReportDisplay | None = None,
    ) -> None:
        super().__init__(args, display=display)
        self.service = service or ApplySuggestionsService()

    @override
    def execute(self) -> ApplyResult:
        self.display.show_banner(quiet=self.args.quiet)
        result = self.service.apply_from_file(self.args.file)
        self.display.show_suggestions(result.report, quiet=self.args.quiet)
        self.display.show_applied(result, quiet=self.args.quiet)
        return result

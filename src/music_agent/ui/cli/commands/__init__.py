"""Command execution package for CLI."""

from music_agent.ui.cli.commands.analyze import AnalyzeCommand
from music_agent.ui.cli.commands.apply import ApplyCommand
from music_agent.ui.cli.commands.executor import CommandExecutor
from music_agent.ui.cli.commands.suggest import SuggestCommand

__all__ = [
    "AnalyzeCommand",
    "ApplyCommand",
    "CommandExecutor",
    "SuggestCommand",
]

"""Command line interface for music-agent."""

import sys
from collections.abc import Sequence
from typing import final

from music_agent.errors import AgentError
from music_agent.platform.logging import logger
from music_agent.ui.cli.args import AgentArgs, ArgumentParser
from music_agent.ui.cli.commands import AnalyzeCommand, ApplyCommand, CommandExecutor, SuggestCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: AgentArgs) -> CommandExecutor:
        if args.mode == "suggest":
            return SuggestCommand(args)
        if args.mode == "apply":
            return ApplyCommand(args)
        return AnalyzeCommand(args)

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            _ = CommandProcessor.build_command(args).execute()
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except AgentError as e:
            logger.error(
                "%s",
                e,
                extra={"agent_event": "agent.error", "error_message": str(e)},
            )
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside :meth:`CommandProcessor.process_command`.
    """
    CommandProcessor.process_command()
    return 0

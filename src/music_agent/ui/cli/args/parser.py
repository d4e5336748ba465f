"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from music_agent.config.config import Config
from music_agent.platform.logging import setup_logger
from music_agent.ui.cli.args.options import AgentArgs, Mode


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="music-agent",
            description="AI-powered music metadata analyzer.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "file",
            type=str,
            help="MP3 file to analyze, or a suggestions file with --apply",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "-m",
            "--model",
            type=str,
            default=None,
            help="LLM model to use (defaults to the configured model)",
        )
        _ = parser.add_argument(
            "-o",
            "--ollama-url",
            type=str,
            default=None,
            help="Ollama server URL (defaults to the configured URL)",
        )

        mode_group = parser.add_mutually_exclusive_group()
        _ = mode_group.add_argument(
            "--suggest",
            action="store_true",
            help="Generate metadata suggestions and save them to a JSON file",
        )
        _ = mode_group.add_argument(
            "--apply",
            action="store_true",
            help="Apply a saved suggestions FILE to a new copy of its MP3",
        )

        verbosity_group = parser.add_mutually_exclusive_group()
        _ = verbosity_group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity_group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> AgentArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            AgentArgs: Arguments merged with configuration defaults.

        Raises:
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO
        _ = setup_logger(console_level=log_level)

        configuration = Config.load()
        if configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        mode: Mode = "analyze"
        if parsed_args.suggest:
            mode = "suggest"
        elif parsed_args.apply:
            mode = "apply"

        return AgentArgs(
            mode=mode,
            file=Path(parsed_args.file),
            model=parsed_args.model or configuration.model,
            ollama_url=parsed_args.ollama_url or configuration.ollama_url,
            request_timeout=configuration.request_timeout,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

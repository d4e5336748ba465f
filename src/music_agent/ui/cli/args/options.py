"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

Mode = Literal["analyze", "suggest", "apply"]


@final
@dataclass(slots=True)
class AgentArgs:
    """Resolved command line arguments.

    ``file`` is the MP3 to inspect, or the suggestions artifact in apply mode.
    """

    mode: Mode
    file: Path
    model: str
    ollama_url: str
    request_timeout: float
    verbose: bool
    quiet: bool


__all__ = ["AgentArgs", "Mode"]

"""src/music_agent/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse model-client construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from music_agent.application.services import MusicAgent
from music_agent.platform.llm import LLMClient, OllamaClient
from music_agent.platform.logging import logger
from music_agent.ui.cli.args.options import AgentArgs
from music_agent.ui.cli.display import ReportDisplay

ClientFactory = Callable[[AgentArgs], LLMClient]


def default_client_factory(args: AgentArgs) -> LLMClient:
    """Build the Ollama client from explicit endpoint settings."""
    logger.debug("Connecting to Ollama (%s)...", args.ollama_url)
    return OllamaClient(args.ollama_url, args.model, timeout=args.request_timeout)


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: AgentArgs
    display: ReportDisplay

    def __init__(
        self,
        args: AgentArgs,
        *,
        client_factory: ClientFactory | None = None,
        display: ReportDisplay | None = None,
    ) -> None:
        self.args = args
        self._client_factory = client_factory or default_client_factory
        self.display = display or ReportDisplay()

    def build_agent(self) -> MusicAgent:
        return MusicAgent(self._client_factory(self.args))

    @abstractmethod
    def execute(self) -> object:
        """Execute the command and return its result."""
        pass

"""Tests for CLI command executors."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from music_agent.features.suggestions import SuggestionsReport
from music_agent.shared.track_metadata import TrackMetadata
from music_agent.ui.cli.args.options import AgentArgs, Mode
from music_agent.ui.cli.commands import AnalyzeCommand, ApplyCommand, SuggestCommand


class _FakeLLM:
    def __init__(self, answer: str) -> None:
        self.answer = answer

    def generate(self, prompt: str) -> str:
        return self.answer

    def provider_name(self) -> str:
        return "Fake"


def _args(mode: Mode, file: Path) -> AgentArgs:
    return AgentArgs(
        mode=mode,
        file=file,
        model="llama3.2",
        ollama_url="http://localhost:11434",
        request_timeout=120.0,
        verbose=False,
        quiet=True,
    )


@pytest.fixture
def mock_read(mocker: MockerFixture, sample_metadata: TrackMetadata) -> MagicMock:
    return mocker.patch(
        "music_agent.ui.cli.commands.suggest.read_metadata", return_value=sample_metadata
    )


def test_analyze_command_returns_report(mocker: MockerFixture, sample_metadata: TrackMetadata) -> None:
    _ = mocker.patch("music_agent.ui.cli.commands.analyze.read_metadata", return_value=sample_metadata)
    command = AnalyzeCommand(
        _args("analyze", Path("song.mp3")),
        client_factory=lambda _args: _FakeLLM("Title is missing."),
        display=MagicMock(),
    )

    report = command.execute()

    assert report.analysis == "Title is missing."
    assert report.has_issues


def test_suggest_command_saves_artifact(
    mocker: MockerFixture, mock_read: MagicMock, tmp_path: Path
) -> None:
    saved = tmp_path / "public" / "suggestions" / "02 Friend of the Devil.suggestions.json"
    mock_save = mocker.patch("music_agent.ui.cli.commands.suggest.save_report", return_value=saved)
    display = MagicMock()
    command = SuggestCommand(
        _args("suggest", Path("song.mp3")),
        client_factory=lambda _args: _FakeLLM("SUGGESTION: title\nSUGGESTED: Friend of the Devil\n---"),
        display=display,
    )

    assert command.execute() == saved

    report = mock_save.call_args.args[0]
    assert [s.suggested_value for s in report.suggestions] == ["Friend of the Devil"]
    display.show_saved.assert_called_once_with(str(saved), quiet=True)


def test_apply_command_delegates_to_service(sample_report: SuggestionsReport) -> None:
    service = MagicMock()
    artifact = Path("public/suggestions/02 Friend of the Devil.suggestions.json")

    result = ApplyCommand(_args("apply", artifact), service=service, display=MagicMock()).execute()

    service.apply_from_file.assert_called_once_with(artifact)
    assert result is service.apply_from_file.return_value

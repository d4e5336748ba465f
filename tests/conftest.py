"""Shared pytest fixtures for the music-agent test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from music_agent.config.config import Config
from music_agent.features.suggestions import MetadataSuggestion, SuggestionsReport
from music_agent.shared.track_metadata import TrackMetadata


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a per-test file that does not exist yet."""

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("MUSIC_AGENT_CONFIG", str(config_path))
    Config.reset()
    yield config_path
    Config.reset()


@pytest.fixture
def sample_metadata() -> TrackMetadata:
    """Metadata with a missing title, like a freshly ripped track."""

    return TrackMetadata(
        file_path="public/originals/02 Friend of the Devil.mp3",
        artist="Grateful Dead",
        title=None,
        album="American Beauty",
        year=1970,
        genre=None,
        track_number=2,
        album_artist=None,
        duration_seconds=204,
    )


@pytest.fixture
def sample_report(sample_metadata: TrackMetadata) -> SuggestionsReport:
    """Report with two edits and a multi-line model answer."""

    return SuggestionsReport(
        file_path=sample_metadata.file_path,
        timestamp="2026-10-18T12:00:00+02:00",
        current_metadata=sample_metadata,
        suggestions=[
            MetadataSuggestion(
                field="title",
                current_value=None,
                suggested_value="Friend of the Devil",
                confidence="High",
                reason="tag missing",
            ),
            MetadataSuggestion(
                field="genre",
                current_value=None,
                suggested_value="Folk Rock",
                confidence="Medium",
                reason="",
            ),
        ],
        llm_analysis="SUGGESTION: title\nSUGGESTED: Friend of the Devil\n---\nSUGGESTION: genre\nSUGGESTED: Folk Rock\n---",
        should_apply=False,
    )

"""
Summary: Validate completeness checks and renderings of TrackMetadata.
Why: Prompts and CLI summaries depend on stable placeholder text.
"""

from __future__ import annotations

import dataclasses

import pytest

from music_agent.shared.track_metadata import TrackMetadata


def test_missing_artist_or_title_is_critical() -> None:
    assert TrackMetadata(file_path="a.mp3", artist="A").has_missing_critical_fields()
    assert TrackMetadata(file_path="a.mp3", title="T").has_missing_critical_fields()
    assert not TrackMetadata(file_path="a.mp3", artist="A", title="T").has_missing_critical_fields()


def test_missing_fields_lists_only_tracked_fields_in_order() -> None:
    metadata = TrackMetadata(file_path="a.mp3", title="T", track_number=None)
    assert metadata.missing_fields() == ["artist", "album", "year", "genre"]


def test_to_prompt_format_uses_placeholders(sample_metadata: TrackMetadata) -> None:
    rendered = sample_metadata.to_prompt_format()

    assert rendered.startswith("File: public/originals/02 Friend of the Devil.mp3\n\nCurrent Metadata:")
    assert "- Artist: Grateful Dead" in rendered
    assert "- Title: (missing)" in rendered
    assert "- Year: 1970" in rendered
    assert "- Duration: 204 seconds" in rendered
    assert rendered.endswith("Missing Fields: title, genre")


def test_to_prompt_format_reports_none_missing_and_unknown_duration() -> None:
    metadata = TrackMetadata(
        file_path="x.mp3", artist="A", title="T", album="B", year=2000, genre="Rock"
    )
    rendered = metadata.to_prompt_format()

    assert "- Duration: unknown seconds" in rendered
    assert rendered.endswith("Missing Fields: None")


def test_summary_uses_unknown_placeholders() -> None:
    summary = TrackMetadata(file_path="x.mp3").summary()

    assert "Unknown Title" in summary
    assert "Artist: Unknown Artist" in summary
    assert "Year: Unknown" in summary


def test_metadata_is_immutable(sample_metadata: TrackMetadata) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample_metadata.title = "changed"  # type: ignore[misc]

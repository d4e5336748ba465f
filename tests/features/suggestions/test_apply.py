"""
Summary: Validate replay order, numeric guards and immutability of apply.
Why: Last-write-wins and silent skips are observable behaviour of the apply run.
"""

from __future__ import annotations

import copy

from music_agent.features.suggestions import (
    MetadataSuggestion,
    SuggestionsReport,
    apply_suggestions,
    parse_suggestions,
)
from music_agent.shared.track_metadata import TrackMetadata


def _report(metadata: TrackMetadata, *edits: tuple[str, str]) -> SuggestionsReport:
    return SuggestionsReport(
        file_path=metadata.file_path,
        timestamp="2026-10-18T12:00:00+00:00",
        current_metadata=metadata,
        suggestions=[
            MetadataSuggestion(field=name, current_value=None, suggested_value=value)
            for name, value in edits
        ],
        llm_analysis="",
    )


def test_last_edit_for_a_field_wins(sample_metadata: TrackMetadata) -> None:
    updated = apply_suggestions(_report(sample_metadata, ("artist", "A"), ("artist", "B")))
    assert updated.artist == "B"


def test_string_fields_are_overwritten(sample_metadata: TrackMetadata) -> None:
    updated = apply_suggestions(
        _report(
            sample_metadata,
            ("title", "Friend of the Devil"),
            ("album", "American Beauty (Remaster)"),
            ("genre", "Folk Rock"),
            ("album_artist", "Grateful Dead"),
        )
    )

    assert updated.title == "Friend of the Devil"
    assert updated.album == "American Beauty (Remaster)"
    assert updated.genre == "Folk Rock"
    assert updated.album_artist == "Grateful Dead"
    assert updated.duration_seconds == sample_metadata.duration_seconds
    assert updated.file_path == sample_metadata.file_path


def test_non_numeric_year_is_ignored(sample_metadata: TrackMetadata) -> None:
    updated = apply_suggestions(_report(sample_metadata, ("year", "not-a-number")))
    assert updated.year == sample_metadata.year


def test_valid_year_after_invalid_one_is_applied(sample_metadata: TrackMetadata) -> None:
    updated = apply_suggestions(_report(sample_metadata, ("year", "1971"), ("year", "nineteen")))
    assert updated.year == 1971


def test_track_number_must_be_non_negative_integer(sample_metadata: TrackMetadata) -> None:
    assert apply_suggestions(_report(sample_metadata, ("track_number", "-3"))).track_number == 2
    assert apply_suggestions(_report(sample_metadata, ("track_number", "2/12"))).track_number == 2
    assert apply_suggestions(_report(sample_metadata, ("track_number", " 7"))).track_number == 2
    assert apply_suggestions(_report(sample_metadata, ("track_number", "7"))).track_number == 7
    assert apply_suggestions(_report(sample_metadata, ("track_number", "+8"))).track_number == 8


def test_unknown_fields_are_ignored(sample_metadata: TrackMetadata) -> None:
    updated = apply_suggestions(_report(sample_metadata, ("composer", "Jerry Garcia")))
    assert updated == sample_metadata


def test_apply_does_not_mutate_report(sample_report: SuggestionsReport) -> None:
    before = copy.deepcopy(sample_report)

    updated = apply_suggestions(sample_report)

    assert sample_report == before
    assert sample_report.current_metadata.title is None
    assert updated is not sample_report.current_metadata


def test_parsed_example_fills_missing_title(sample_metadata: TrackMetadata) -> None:
    text = (
        "SUGGESTION: title\nCURRENT: None\nSUGGESTED: Friend of the Devil\n"
        "CONFIDENCE: High\nREASON: tag missing\n---"
    )
    report = SuggestionsReport.create(
        file_path=sample_metadata.file_path,
        current_metadata=sample_metadata,
        suggestions=parse_suggestions(text, sample_metadata),
        llm_analysis=text,
    )

    assert apply_suggestions(report).title == "Friend of the Devil"

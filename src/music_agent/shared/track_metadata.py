# Where: music_agent.shared.track_metadata
# What: Canonical TrackMetadata dataclass shared across features.
# Why: Centralize metadata representation and its prompt/summary renderings.

from __future__ import annotations

from dataclasses import dataclass

_MISSING = "(missing)"


def _or_placeholder(value: object | None, placeholder: str) -> str:
    return placeholder if value is None else str(value)


@dataclass(frozen=True)
class TrackMetadata:
    """Tag fields read from a single audio file."""

    file_path: str
    artist: str | None = None
    title: str | None = None
    album: str | None = None
    year: int | None = None
    genre: str | None = None
    track_number: int | None = None
    album_artist: str | None = None
    duration_seconds: int | None = None

    def has_missing_critical_fields(self) -> bool:
        """Return True when artist or title is absent."""
        return self.artist is None or self.title is None

    def missing_fields(self) -> list[str]:
        """Names of absent fields among artist, title, album, year and genre."""
        candidates = {
            "artist": self.artist,
            "title": self.title,
            "album": self.album,
            "year": self.year,
            "genre": self.genre,
        }
        return [name for name, value in candidates.items() if value is None]

    def to_prompt_format(self) -> str:
        """Render the record as the metadata section of a model prompt."""

        missing = self.missing_fields()
        lines = [
            f"File: {self.file_path}",
            "",
            "Current Metadata:",
            f"- Artist: {_or_placeholder(self.artist, _MISSING)}",
            f"- Title: {_or_placeholder(self.title, _MISSING)}",
            f"- Album: {_or_placeholder(self.album, _MISSING)}",
            f"- Year: {_or_placeholder(self.year, _MISSING)}",
            f"- Genre: {_or_placeholder(self.genre, _MISSING)}",
            f"- Track Number: {_or_placeholder(self.track_number, _MISSING)}",
            f"- Album Artist: {_or_placeholder(self.album_artist, _MISSING)}",
            f"- Duration: {_or_placeholder(self.duration_seconds, 'unknown')} seconds",
            "",
            f"Missing Fields: {', '.join(missing) if missing else 'None'}",
        ]
        return "\n".join(lines)

    def summary(self) -> str:
        """Short human-readable description used by the CLI."""
        return "\n".join(
            [
                f"🎵 {_or_placeholder(self.title, 'Unknown Title')}",
                f"   Artist: {_or_placeholder(self.artist, 'Unknown Artist')}",
                f"   Album: {_or_placeholder(self.album, 'Unknown Album')}",
                f"   Year: {_or_placeholder(self.year, 'Unknown')}",
                f"   Genre: {_or_placeholder(self.genre, 'Unknown')}",
            ]
        )


__all__ = ["TrackMetadata"]

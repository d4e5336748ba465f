"""Read ID3 tags from an MP3 file into a TrackMetadata record."""

from __future__ import annotations

from pathlib import Path

from mutagen import MutagenError
from mutagen.easyid3 import EasyID3
from mutagen.mp3 import MP3

from music_agent.errors import FileAccessError, MetadataParseError
from music_agent.platform.logging import logger
from music_agent.shared.track_metadata import TrackMetadata

from ._tag_utils import first_text, parse_length_seconds, parse_slash_separated, parse_year

SUPPORTED_EXTENSION = ".mp3"


def _stream_length_seconds(path: Path) -> int | None:
    """Length of the MPEG stream, when mutagen can find one."""
    try:
        audio = MP3(str(path))
    except MutagenError as exc:
        logger.debug("No readable MPEG stream in %s: %s", path, exc)
        return None
    length = getattr(audio.info, "length", None)
    return int(length) if length else None


def read_metadata(file_path: Path | str) -> TrackMetadata:
    """Read the tags of ``file_path``.

    Raises:
        FileAccessError: If the file is missing or not an MP3.
        MetadataParseError: If the ID3 tag is missing or unreadable.
    """

    path = Path(file_path)
    if not path.exists():
        raise FileAccessError(f"File not found: {file_path}")
    if path.suffix.lower() != SUPPORTED_EXTENSION:
        raise FileAccessError(f"Not an MP3 file: {file_path}")

    logger.info(
        "Reading metadata from %s",
        path,
        extra={"agent_event": "agent.read", "path": str(path)},
    )
    try:
        tags = EasyID3(str(path))
    except MutagenError as exc:
        raise MetadataParseError(f"Failed to read ID3 tags from {file_path}: {exc}") from exc

    track_number, _ = parse_slash_separated(first_text(tags, "tracknumber"))
    duration = parse_length_seconds(first_text(tags, "length"))
    if duration is None:
        duration = _stream_length_seconds(path)

    return TrackMetadata(
        file_path=str(file_path),
        artist=first_text(tags, "artist"),
        title=first_text(tags, "title"),
        album=first_text(tags, "album"),
        year=parse_year(first_text(tags, "date")),
        genre=first_text(tags, "genre"),
        track_number=track_number,
        album_artist=first_text(tags, "albumartist"),
        duration_seconds=duration,
    )


__all__ = ["SUPPORTED_EXTENSION", "read_metadata"]

"""Summary: Write metadata into a new copy of an MP3 file, never the original.
Why: Applying suggestions must leave the source file byte-for-byte untouched.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from mutagen import MutagenError
from mutagen.easyid3 import EasyID3

from music_agent.errors import FileAccessError, MetadataParseError
from music_agent.features.path import allocate_output_path
from music_agent.platform.logging import logger
from music_agent.shared.track_metadata import TrackMetadata


class TagEditor:
    """Mutator surface over an in-memory EasyID3 tag."""

    def __init__(self, tags: EasyID3) -> None:
        self.tags: EasyID3 = tags

    @classmethod
    def open(cls, path: Path) -> "TagEditor":
        """Load the tag of ``path``, or start an empty one if it has none."""
        try:
            return cls(EasyID3(str(path)))
        except MutagenError:
            return cls(EasyID3())

    def _set(self, key: str, value: str) -> None:
        self.tags[key] = [value]

    def set_artist(self, artist: str) -> None:
        self._set("artist", artist)

    def set_title(self, title: str) -> None:
        self._set("title", title)

    def set_album(self, album: str) -> None:
        self._set("album", album)

    def set_year(self, year: int) -> None:
        self._set("date", str(year))

    def set_genre(self, genre: str) -> None:
        self._set("genre", genre)

    def set_track_number(self, track_number: int) -> None:
        self._set("tracknumber", str(track_number))

    def set_album_artist(self, album_artist: str) -> None:
        self._set("albumartist", album_artist)

    def apply(self, metadata: TrackMetadata) -> None:
        """Set every field that is present in ``metadata``."""
        if metadata.artist is not None:
            self.set_artist(metadata.artist)
        if metadata.title is not None:
            self.set_title(metadata.title)
        if metadata.album is not None:
            self.set_album(metadata.album)
        if metadata.year is not None:
            self.set_year(metadata.year)
        if metadata.genre is not None:
            self.set_genre(metadata.genre)
        if metadata.track_number is not None:
            self.set_track_number(metadata.track_number)
        if metadata.album_artist is not None:
            self.set_album_artist(metadata.album_artist)

    def write(self, path: Path) -> None:
        """Save the tag to ``path`` as ID3v2.4."""
        try:
            self.tags.save(str(path), v2_version=4)
        except MutagenError as exc:
            raise MetadataParseError(f"Failed to write ID3 tags: {exc}") from exc


def write_metadata_safely(original_file: Path | str, metadata: TrackMetadata) -> Path:
    """Copy ``original_file`` to a fresh path and write ``metadata`` into the copy.

    Returns:
        Path: Location of the updated copy.

    Raises:
        FileAccessError: If the original is missing or the copy fails.
        MetadataParseError: If the tag cannot be written.
    """

    original = Path(original_file)
    if not original.exists():
        raise FileAccessError(f"File not found: {original_file}")

    output_path = allocate_output_path(original)
    try:
        _ = shutil.copy2(original, output_path)
    except OSError as exc:
        raise FileAccessError(f"Failed to create output file: {exc}") from exc

    try:
        editor = TagEditor.open(output_path)
        editor.apply(metadata)
        editor.write(output_path)
    except MetadataParseError:
        # Leave no untagged copy behind.
        output_path.unlink(missing_ok=True)
        raise

    logger.debug(
        "Updated copy written to %s",
        output_path,
        extra={"agent_event": "agent.apply.written", "path": str(output_path)},
    )
    return output_path


__all__ = ["TagEditor", "write_metadata_safely"]

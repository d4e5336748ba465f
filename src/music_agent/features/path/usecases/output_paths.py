"""Summary: Derive sibling output directories and collision-free copy paths.
Why: Edited copies must never overwrite the original or an earlier copy.

Layout, for a target leaf such as ``updated``::

    public/originals/song.mp3  ->  public/updated/
    public/song.mp3            ->  public/updated/
    music/song.mp3             ->  music/updated/
    song.mp3                   ->  public/updated/
"""

from __future__ import annotations

from pathlib import Path

from music_agent.config.settings import (
    ORIGINALS_DIR_NAME,
    OUTPUT_EXTENSION,
    PUBLIC_DIR_NAME,
    UPDATED_DIR_NAME,
)
from music_agent.platform.filesystem import ensure_directory


def derive_sibling_directory(source: Path | str, leaf: str) -> Path:
    """Return the directory named ``leaf`` that belongs next to ``source``.

    Pure: nothing is created on disk.
    """

    parent = Path(source).parent
    if parent == Path("."):
        return Path(PUBLIC_DIR_NAME) / leaf
    if parent.name == ORIGINALS_DIR_NAME:
        return parent.parent / leaf
    # Files directly in public/ and anywhere else both get a child directory.
    return parent / leaf


def allocate_output_path(
    original_path: Path | str,
    *,
    leaf: str = UPDATED_DIR_NAME,
    extension: str = OUTPUT_EXTENSION,
) -> Path:
    """Return a path for an edited copy of ``original_path`` that does not exist yet.

    The target directory is created when missing. Existing candidates are
    skipped by appending ``-1``, ``-2`` and so on to the stem.

    Raises:
        FileAccessError: If the target directory cannot be created.
    """

    directory = ensure_directory(derive_sibling_directory(original_path, leaf))
    stem = Path(original_path).stem

    candidate = directory / f"{stem}{extension}"
    counter = 1
    while candidate.exists():
        candidate = directory / f"{stem}-{counter}{extension}"
        counter += 1
    return candidate


__all__ = ["allocate_output_path", "derive_sibling_directory"]

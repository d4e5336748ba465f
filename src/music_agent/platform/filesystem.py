"""Summary: Directory and text-file helpers that report failures as FileAccessError.
Why: Give persistence, output allocation and config one consistent I/O error surface.
"""

from __future__ import annotations

from pathlib import Path

from music_agent.errors import FileAccessError


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) when missing and return it."""

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileAccessError(f"Failed to create directory {path}: {exc}") from exc
    return path


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist.

    The text is encoded before the file is opened, so an unencodable string
    leaves any existing file intact.
    """

    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise FileAccessError(f"Failed to encode {path}: {exc}") from exc

    _ = ensure_directory(path.parent)
    try:
        _ = path.write_bytes(data)
    except OSError as exc:
        raise FileAccessError(f"Failed to write {path}: {exc}") from exc


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file."""

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(f"Failed to read {path}: {exc}") from exc


__all__ = ["ensure_directory", "read_text_file", "write_text_file"]

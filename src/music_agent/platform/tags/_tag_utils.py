"""Tag utility helpers.

Where: src/music_agent/platform/tags/_tag_utils.py
What: Pure helpers for parsing ID3 text values.
Why: Keep number and date parsing testable apart from mutagen objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = [
    "first_text",
    "parse_length_seconds",
    "parse_slash_separated",
    "parse_year",
]


def first_text(tags: Mapping[str, Any] | Any, key: str) -> str | None:
    """Return the first non-empty string stored under ``key``."""
    value = tags.get(key)
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, str) and value.strip():
        return value
    return None


def parse_slash_separated(value: str | None) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = value.strip().split("/") if value else []
    num: int | None = int(parts[0]) if parts and parts[0].isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
    return num, total


def parse_year(date_str: str | None) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    return int(date_str[:4]) if date_str and len(date_str) >= 4 and date_str[:4].isdigit() else None


def parse_length_seconds(length_ms: str | None) -> int | None:
    """Convert a TLEN value in milliseconds to whole seconds."""
    if not length_ms or not length_ms.strip().isdigit():
        return None
    return int(length_ms.strip()) // 1000

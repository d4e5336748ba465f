"""Summary: Rich console handler that renders agent pipeline events.
Why: Show read, model, save and apply steps with consistent icons and compact paths.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class AgentRichHandler(RichHandler):
    """Rich handler that styles records carrying an ``agent_event`` extra."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "agent.read": ("📖", "cyan", "Reading metadata from "),
        "agent.llm.request": ("🤖", "blue", "Asking "),
        "agent.llm.response": ("💬", "blue", "Model answered "),
        "agent.suggestions.parsed": ("💡", "yellow", "Parsed suggestions "),
        "agent.suggestions.saved": ("💾", "green", "Suggestions saved to "),
        "agent.suggestions.loaded": ("📂", "cyan", "Loaded suggestions from "),
        "agent.apply.written": ("✅", "green", "Updated copy written to "),
        "agent.error": ("❌", "red", "Failed "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def format_path(self, raw_path: str) -> Text:
        """Render a path keeping only its last few segments."""

        path = self._to_pure_path(raw_path)
        separator = "\\" if isinstance(path, PureWindowsPath) else "/"
        parts = [part for part in path.parts if part and part != path.anchor]

        prefix = path.anchor
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]
            prefix = "…" + separator
        rendered = prefix + separator.join(parts) if parts or prefix else "."

        text = Text()
        for char in rendered:
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_agent_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "agent_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        provider = getattr(record, "provider", None)
        model = getattr(record, "model", None)
        if provider:
            _ = body.append(str(provider))
            if model:
                _ = body.append(f" ({model})")

        path = getattr(record, "path", None)
        if path:
            _ = body.append_text(self.format_path(str(path)))

        details: list[str] = []
        count = getattr(record, "count", None)
        if isinstance(count, int):
            details.append(f"count={count}")
        chars = getattr(record, "chars", None)
        if isinstance(chars, int):
            details.append(f"chars={chars}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render agent events with dedicated styling, anything else as usual."""

        event_text = self._render_agent_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["AgentRichHandler"]

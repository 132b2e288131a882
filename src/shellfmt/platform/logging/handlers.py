"""Rich console handler for formatter events.

Where: platform/logging/handlers.py
What: Render structured ``format.*`` log records as compact, coloured lines.
Why: Keep diagnostics on stderr readable without leaking styling into callers.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class FormatEventRichHandler(RichHandler):
    """Rich handler that styles formatter events and shortens their paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "format.batch.start": ("🚀", "cyan"),
        "format.batch.complete": ("✅", "green"),
        "format.root.error": ("❌", "red"),
        "format.file.start": ("📄", "blue"),
        "format.file.unchanged": ("✔", "green"),
        "format.file.changed": ("✏", "yellow"),
        "format.file.write": ("💾", "magenta"),
        "format.file.skip.shebang": ("↪", "yellow"),
        "format.file.skip.missing": ("↪", "yellow"),
        "format.file.error": ("⛔", "red"),
    }
    _PREFIXES: ClassVar[dict[str, str]] = {
        "format.file.start": "Formatting ",
        "format.file.unchanged": "Unchanged ",
        "format.file.changed": "Needs formatting ",
        "format.file.write": "Rewrote ",
        "format.file.skip.shebang": "Skipped (no shebang) ",
        "format.file.skip.missing": "Skipped (vanished) ",
        "format.file.error": "Failed ",
        "format.root.error": "Cannot walk ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` when possible, truncating long ones."""
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor if isinstance(display_path, PureWindowsPath) else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_format_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured formatter events with dedicated styling."""

        event = getattr(record, "format_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("format.batch"):
            roots = getattr(record, "roots", None)
            if event == "format.batch.start":
                _ = body.append("Batch start")
                if isinstance(roots, int):
                    _ = body.append(f" [roots={roots}]")
            else:
                _ = body.append("Batch complete")
                metrics: list[str] = []
                for key in ("processed", "changed", "skipped", "failed"):
                    value = getattr(record, key, None)
                    if isinstance(value, int):
                        metrics.append(f"{key}={value}")
                duration = getattr(record, "duration_seconds", None)
                if isinstance(duration, (int, float)):
                    metrics.append(f"duration={duration:.2f}s")
                if metrics:
                    _ = body.append(" [" + ", ".join(metrics) + "]")
        else:
            prefix = self._PREFIXES.get(event)
            if prefix:
                _ = body.append(prefix)
            source_path = getattr(record, "source_path", None)
            if source_path is not None:
                shown = str(source_path) or "<standard input>"
                _ = body.append_text(
                    self._format_path(shown, base=getattr(record, "source_base_path", None))
                )
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for formatter events."""

        event_text = self._render_format_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["FormatEventRichHandler"]

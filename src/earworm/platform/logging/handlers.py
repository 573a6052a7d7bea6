"""Rich console handler for Earworm log events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EarwormRichHandler(RichHandler):
    """Rich handler that renders library and round events compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "library.scan.start": ("🔎", "cyan"),
        "library.scan.complete": ("✅", "green"),
        "library.scan.no_files": ("ℹ️", "yellow"),
        "library.scan.missing_root": ("❌", "red"),
        "library.track.fallback": ("🏷️", "yellow"),
        "library.track.skip": ("↪️", "yellow"),
        "round.start": ("🎧", "blue"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

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
        """Format a path with coloured separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with ellipsis truncation of leading segments.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
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
            display_string = anchor.rstrip("\\/") + separator
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
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured events with dedicated styling."""

        event = getattr(record, "library_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("library.scan"):
            label = {
                "library.scan.start": "Scanning",
                "library.scan.complete": "Scan complete",
                "library.scan.no_files": "No mp3 files found",
                "library.scan.missing_root": "Not a directory",
            }.get(event, "Scan")
            _ = body.append(label)

            metrics: list[str] = []
            for key in ("found", "added", "skipped"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")

            directory = getattr(record, "directory", None)
            if directory:
                _ = body.append(" @ ")
                _ = body.append_text(self._format_path(str(directory)))
        elif event.startswith("library.track"):
            prefix = "Using filename for " if event == "library.track.fallback" else "Skipped "
            _ = body.append(prefix)
            source_path = getattr(record, "source_path", None)
            if source_path:
                _ = body.append_text(
                    self._format_path(
                        str(source_path),
                        base=getattr(record, "source_base_path", None),
                    )
                )
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
        else:
            candidates = getattr(record, "candidates", None)
            requested = getattr(record, "requested", None)
            _ = body.append("Round started")
            if isinstance(candidates, int):
                detail = f"candidates={candidates}"
                if isinstance(requested, int) and requested != candidates:
                    detail += f"/{requested}"
                _ = body.append(f" [{detail}]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for structured events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["EarwormRichHandler"]

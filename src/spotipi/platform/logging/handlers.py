"""Rich console handler for catalog log records.

Where: platform/logging/handlers.py
What: Render structured catalog events with short, music-relative file paths.
Why: Keep per-file diagnostics readable when a build logs many fallbacks.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import override

from rich.text import Text
from rich.logging import RichHandler

_MAX_PATH_PARTS = 4


class CatalogRichHandler(RichHandler):
    """RichHandler that prefixes catalog events and shortens file paths."""

    def __init__(self, *args: object, **kwargs: object) -> None:
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)  # pyright: ignore[reportArgumentType]

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        rendered = super().render_message(record, message)
        event = getattr(record, "catalog_event", None)
        if event is None:
            return rendered

        text = Text()
        _ = text.append(f"[{event}] ", style="bold cyan")
        file_path = getattr(record, "file_path", None)
        if file_path is not None:
            display = self.format_path(str(file_path), getattr(record, "music_dir", None))
            _ = text.append(display, style="white")
            _ = text.append(" ")
        _ = text.append_text(rendered)
        return text

    @staticmethod
    def format_path(path: str, base: object | None = None) -> str:
        """Return ``path`` relative to ``base`` when possible, else abbreviated."""

        flavour: type[PurePath] = PureWindowsPath if "\\" in path else PurePosixPath
        candidate = flavour(path)
        if base is not None:
            try:
                return str(candidate.relative_to(flavour(str(base))))
            except ValueError:
                pass

        parts = candidate.parts
        if candidate.is_absolute() and len(parts) > _MAX_PATH_PARTS:
            separator = "\\" if flavour is PureWindowsPath else "/"
            return "…" + separator + separator.join(parts[-_MAX_PATH_PARTS:])
        return str(candidate)


__all__ = ["CatalogRichHandler"]

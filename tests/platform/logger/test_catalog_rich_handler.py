"""Tests for the ``CatalogRichHandler`` formatting utilities."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from spotipi.platform.logging import CatalogRichHandler, setup_logger


def _make_handler() -> CatalogRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return CatalogRichHandler(console=console)


def _build_record(msg: str = "message", **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="spotipi",
        level=logging.WARNING,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_plain_records_render_unchanged() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "plain message")

    assert rendered.plain == "plain message"


def test_event_prefix_and_relative_path() -> None:
    handler = _make_handler()
    record = _build_record(
        catalog_event="catalog.file.fallback",
        file_path="/srv/music/albums/broken.wav",
        music_dir="/srv/music",
    )

    rendered = handler.render_message(record, "Error parsing metadata")

    assert isinstance(rendered, Text)
    assert rendered.plain == "[catalog.file.fallback] albums/broken.wav Error parsing metadata"


def test_format_path_abbreviates_long_absolute_paths() -> None:
    path = "/home/user/media/library/music/artist/album/track.flac"

    assert CatalogRichHandler.format_path(path) == "…/music/artist/album/track.flac"


def test_format_path_handles_windows_paths() -> None:
    base = "C:\\media\\music"
    path = "C:\\media\\music\\Artist\\Track.flac"

    assert CatalogRichHandler.format_path(path, base) == "Artist\\Track.flac"


def test_setup_logger_attaches_rotating_file(tmp_path: Any) -> None:
    log_file = tmp_path / "logs" / "spotipi.log"

    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        logger.debug("written to file")
        for handler in logger.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()

"""Tests for catalog CLI rendering."""

import json
from io import StringIO

import pytest
from rich.console import Console

from spotipi.shared import Track
from spotipi.ui.cli.display import CatalogDisplay, format_duration


def _display() -> tuple[CatalogDisplay, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, width=160, color_system=None)
    return CatalogDisplay(console), buffer


@pytest.mark.parametrize(("seconds", "expected"), [(0, "0:00"), (59, "0:59"), (125, "2:05"), (-3, "0:00")])
def test_format_duration(seconds: int, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_show_tracks_renders_rows_and_summary() -> None:
    display, buffer = _display()
    tracks = [
        Track("song.mp3", "Test", "Band", "Unknown Album", 125, "/music/song.mp3"),
        Track.fallback("broken.wav", "/music"),
    ]

    display.show_tracks(tracks)

    output = buffer.getvalue()
    assert "Test" in output and "Band" in output and "2:05" in output
    assert "broken.wav" in output
    assert "Tracks: 2" in output
    assert "Without artist/album tags: 1" in output


def test_show_tracks_quiet_prints_nothing() -> None:
    display, buffer = _display()

    display.show_tracks([Track.fallback("a.mp3", "/music")], quiet=True)

    assert buffer.getvalue() == ""


def test_show_json_matches_wire_format() -> None:
    display, buffer = _display()
    track = Track.fallback("a.mp3", "/music")

    display.show_json([track])

    assert json.loads(buffer.getvalue()) == [track.to_dict()]

"""Tests for the Track record and its defaulting rules."""

import dataclasses

import pytest

from spotipi.shared import UNKNOWN_ALBUM, UNKNOWN_ARTIST, Track, TrackMetadata
from spotipi.shared.track import public_filepath, strip_extension


def test_fallback_uses_only_the_file_name() -> None:
    track = Track.fallback("My Song.flac", "/music")

    assert track == Track(
        id="My Song.flac",
        title="My Song",
        artist=UNKNOWN_ARTIST,
        album=UNKNOWN_ALBUM,
        duration=0,
        filepath="/music/My Song.flac",
    )


def test_from_metadata_keeps_present_values() -> None:
    metadata = TrackMetadata(title="T", artist="A", album="B", duration_seconds=61)

    track = Track.from_metadata("t.mp3", metadata, "/music")

    assert (track.title, track.artist, track.album, track.duration) == ("T", "A", "B", 61)


def test_to_dict_field_order() -> None:
    payload = Track.fallback("a.wav", "/music").to_dict()

    assert list(payload) == ["id", "title", "artist", "album", "duration", "filepath"]
    assert isinstance(payload["duration"], int)


def test_track_is_immutable() -> None:
    track = Track.fallback("a.wav", "/music")

    with pytest.raises(dataclasses.FrozenInstanceError):
        track.title = "changed"  # pyright: ignore[reportAttributeAccessIssue]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("song.mp3", "song"),
        ("live.take.2.opus", "live.take.2"),
        ("noext", "noext"),
        (".mp3", ".mp3"),
    ],
)
def test_strip_extension(name: str, expected: str) -> None:
    assert strip_extension(name) == expected


def test_public_filepath_joins_once() -> None:
    assert public_filepath("/music/", "a.mp3") == "/music/a.mp3"
    assert public_filepath("/music", "a.mp3") == "/music/a.mp3"

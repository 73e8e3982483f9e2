"""Tests for metadata extraction functionality."""

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from mutagen.id3 import TALB, TIT2, TPE1
from mutagen.wave import WAVE
from pytest_mock import MockerFixture

from spotipi.features.catalog import MetadataExtractor, TrackMetadata
from spotipi.features.catalog.usecases.extraction import Mp3Extractor, OpusExtractor

WavFactory = Callable[..., Path]


class FakeAudio:
    """Stand-in for a mutagen ``FileType`` with dict-like tags."""

    def __init__(self, tags: dict[str, Any], length: float | None) -> None:
        self._tags = tags
        self.info = SimpleNamespace(length=length)

    def get(self, key: str, default: Any = None) -> Any:
        return self._tags.get(key, default)


class TestMetadataExtractor:
    """Test cases for MetadataExtractor."""

    def test_unsupported_format(self) -> None:
        """Test extraction with unsupported file format."""
        with pytest.raises(ValueError, match="Unsupported file format"):
            _ = MetadataExtractor.extract(Path("test.m4a"))

    def test_nonexistent_file(self) -> None:
        """Test extraction with nonexistent file."""
        with pytest.raises(FileNotFoundError):
            _ = MetadataExtractor.extract(Path("nonexistent.mp3"))

    @pytest.mark.parametrize("name", ["empty.mp3", "empty.wav", "empty.flac", "empty.opus"])
    def test_zero_byte_file_fails(self, tmp_path: Path, name: str) -> None:
        """A zero-byte file with a recognized suffix cannot be parsed."""
        test_file = tmp_path / name
        test_file.touch()

        with pytest.raises(Exception):
            _ = MetadataExtractor.extract(test_file)

    def test_routes_by_suffix(self, tmp_path: Path, mocker: MockerFixture) -> None:
        """The facade dispatches to the per-format method for the suffix."""
        expected = TrackMetadata(title="Routed")
        mock_flac = mocker.patch.object(MetadataExtractor, "_extract_flac", return_value=expected)

        assert MetadataExtractor.extract(tmp_path / "song.flac") == expected
        mock_flac.assert_called_once_with(tmp_path / "song.flac")

    def test_mp3_tags_and_floored_duration(self, tmp_path: Path, mocker: MockerFixture) -> None:
        """Present tags are copied, absent ones stay ``None``, duration is floored."""
        audio = FakeAudio({"title": ["Test"], "artist": ["Band"]}, length=125.7)
        _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", mocker.MagicMock(return_value=audio))

        metadata = MetadataExtractor.extract(tmp_path / "song.mp3")

        assert metadata == TrackMetadata(
            title="Test",
            artist="Band",
            album=None,
            duration_seconds=125,
        )

    def test_empty_tag_value_is_kept(self, tmp_path: Path, mocker: MockerFixture) -> None:
        """A present but empty tag is distinguishable from a missing one."""
        audio = FakeAudio({"title": [""], "album": []}, length=3.0)
        _ = mocker.patch.object(OpusExtractor, "FILE_CLASS", mocker.MagicMock(return_value=audio))

        metadata = MetadataExtractor.extract(tmp_path / "song.opus")

        assert metadata.title == ""
        assert metadata.album is None
        assert metadata.artist is None

    @pytest.mark.parametrize("length", [float("nan"), float("inf"), -1.0, None])
    def test_unrepresentable_duration_is_absent(
        self, tmp_path: Path, mocker: MockerFixture, length: float | None
    ) -> None:
        audio = FakeAudio({"title": ["Odd"]}, length=length)
        _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", mocker.MagicMock(return_value=audio))

        metadata = MetadataExtractor.extract(tmp_path / "odd.mp3")

        assert metadata.title == "Odd"
        assert metadata.duration_seconds is None

    def test_untagged_wav(self, make_wav: WavFactory) -> None:
        """A real WAV without an ID3 chunk yields only a duration."""
        wav = make_wav("tone.wav", seconds=2.5)

        metadata = MetadataExtractor.extract(wav)

        assert metadata == TrackMetadata(duration_seconds=2)

    def test_tagged_wav(self, make_wav: WavFactory) -> None:
        """ID3 frames inside a WAV are read through the WAV extractor."""
        wav = make_wav("tagged.wav", seconds=1.0)
        audio = WAVE(wav)
        audio.add_tags()
        assert audio.tags is not None
        audio.tags.add(TIT2(encoding=3, text=["Tone"]))
        audio.tags.add(TPE1(encoding=3, text=["Band"]))
        audio.tags.add(TALB(encoding=3, text=["Tests"]))
        audio.save()

        metadata = MetadataExtractor.extract(wav)

        assert metadata == TrackMetadata(
            title="Tone",
            artist="Band",
            album="Tests",
            duration_seconds=1,
        )

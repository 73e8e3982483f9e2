"""Shared base classes for metadata extractors.

Where: src/spotipi/features/catalog/usecases/extraction/_base_extractors.py
What: Define abstract base classes that encapsulate shared tag handling logic.
Why: Let each format extractor declare only its mutagen class and tag keys.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, Protocol, cast, override

from mutagen import MutagenError

from spotipi.platform.logging import logger
from spotipi.shared.track_metadata import TrackMetadata

from ._tag_utils import floor_duration, safe_get_first


class MutagenTags(Protocol):
    """Dict-like view shared by mutagen file objects and their tag containers."""

    def get(self, key: str, default: Any = None) -> Any: ...


__all__ = [
    "AudioFormatExtractor",
    "BaseTagExtractor",
    "BaseAudioExtractor",
    "MutagenTags",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio metadata extractors."""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file."""
        raise NotImplementedError


class BaseTagExtractor:
    """Provides common helper methods for tag extraction."""

    @staticmethod
    def get_str_tag(tags: MutagenTags, key: str, default: str | None = None) -> str | None:
        """Extract the first string value for a key from tag collection."""
        value: str | list[str] | None = cast(str | list[str] | None, tags.get(key))
        if isinstance(value, list):
            return safe_get_first(data=value, default=default)
        if isinstance(value, str):
            return value
        return default


class BaseAudioExtractor(AudioFormatExtractor, abc.ABC):
    """Base class for audio metadata extractors."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "artist": "",
        "album": "",
    }

    def _open_file(self, file_path: Path) -> Any:
        """Open the audio file through its mutagen class."""
        try:
            if self.FILE_CLASS is None:
                raise NotImplementedError("FILE_CLASS must be defined in subclass")

            return self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
        except MutagenError as exc:
            if "No such file" in str(exc):
                raise FileNotFoundError(str(exc)) from exc
            raise

    @abc.abstractmethod
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Get a tag value from the audio file."""
        raise NotImplementedError

    @staticmethod
    def _get_duration(audio: Any) -> int | None:
        info = getattr(audio, "info", None)
        return floor_duration(getattr(info, "length", None))

    @override
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file."""
        try:
            audio = self._open_file(file_path)
            logger.debug("Opened file %s as %s", file_path, type(audio).__name__)

            title: str | None = self._get_tag_value(audio, key=self.TAG_MAPPING["title"])
            artist: str | None = self._get_tag_value(audio, key=self.TAG_MAPPING["artist"])
            album: str | None = self._get_tag_value(audio, key=self.TAG_MAPPING["album"])
            duration: int | None = self._get_duration(audio)

            metadata = TrackMetadata(
                title=title,
                artist=artist,
                album=album,
                duration_seconds=duration,
            )
            logger.debug("Extracted metadata: %s", metadata)
            return metadata
        except Exception as exc:
            logger.error(
                "Failed to extract %s metadata from %s: %s",
                self.__class__.__name__.replace("Extractor", ""),
                file_path,
                exc,
            )
            raise

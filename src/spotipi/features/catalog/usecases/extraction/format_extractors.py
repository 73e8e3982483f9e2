"""Format-specific metadata extractors.

Where: src/spotipi/features/catalog/usecases/extraction/format_extractors.py
What: Define concrete metadata extractors for the recognized audio formats.
Why: Separate format logic from the facade so adding a suffix stays a one-class change.
"""

from __future__ import annotations

from typing import Any, ClassVar

from mutagen.easyid3 import EasyID3
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.oggopus import OggOpus
from mutagen.wave import WAVE

from ._base_extractors import BaseAudioExtractor, BaseTagExtractor, MutagenTags
from ._tag_utils import frame_text

__all__ = [
    "Mp3Extractor",
    "FlacExtractor",
    "OpusExtractor",
    "WavExtractor",
]

_VORBIS_MAPPING: dict[str, str] = {
    "title": "title",
    "artist": "artist",
    "album": "album",
}


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files using EasyID3 tags."""

    FILE_CLASS: ClassVar[type | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"ID3": EasyID3}

    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files."""

    FILE_CLASS: ClassVar[type | None] = FLAC
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class OpusExtractor(BaseAudioExtractor):
    """Extractor for Opus (.opus) files using Vorbis comments."""

    FILE_CLASS: ClassVar[type | None] = OggOpus
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class WavExtractor(BaseAudioExtractor):
    """Extractor for WAV files carrying an ID3 chunk."""

    FILE_CLASS: ClassVar[type | None] = WAVE
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
    }

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        return frame_text(tags.get(key))

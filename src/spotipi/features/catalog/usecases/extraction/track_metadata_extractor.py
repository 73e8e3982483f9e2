"""Audio file metadata extraction functionality.

Where: src/spotipi/features/catalog/usecases/extraction/track_metadata_extractor.py
What: Provide the MetadataExtractor facade routing files to format extractors.
Why: Give the catalog builder one narrow entry point over mutagen.
"""

from pathlib import Path
from typing import ClassVar, Callable

from spotipi.shared.track_metadata import TrackMetadata

from ._base_extractors import AudioFormatExtractor
from .format_extractors import (
    FlacExtractor,
    Mp3Extractor,
    OpusExtractor,
    WavExtractor,
)

__all__ = ["MetadataExtractor"]


class MetadataExtractor:
    """Facade class for extracting metadata from audio files.

    This class selects the appropriate extractor based on file extension.
    """

    SUPPORTED_FORMATS: ClassVar[set[str]] = {".mp3", ".flac", ".opus", ".wav"}

    # Mapping from file extension to corresponding extractor instance.
    _format_map: ClassVar[dict[str, AudioFormatExtractor]] = {
        ".mp3": Mp3Extractor(),
        ".flac": FlacExtractor(),
        ".opus": OpusExtractor(),
        ".wav": WavExtractor(),
    }

    @classmethod
    def _extract_mp3(cls, file_path: Path) -> TrackMetadata:
        return cls._format_map[".mp3"].extract_metadata(file_path)

    @classmethod
    def _extract_flac(cls, file_path: Path) -> TrackMetadata:
        return cls._format_map[".flac"].extract_metadata(file_path)

    @classmethod
    def _extract_opus(cls, file_path: Path) -> TrackMetadata:
        return cls._format_map[".opus"].extract_metadata(file_path)

    @classmethod
    def _extract_wav(cls, file_path: Path) -> TrackMetadata:
        return cls._format_map[".wav"].extract_metadata(file_path)

    @classmethod
    def extract(cls, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            TrackMetadata: Extracted metadata; absent tags are ``None``.

        Raises:
            ValueError: If the file format is unsupported.
            FileNotFoundError: If the file does not exist.
            Exception: If mutagen cannot parse the file.
        """
        ext: str = file_path.suffix.lower()
        if ext not in cls.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported file format: {ext}")

        # Route through per-format methods to allow easy mocking in tests
        method_map: dict[str, Callable[[Path], TrackMetadata]] = {
            ".mp3": cls._extract_mp3,
            ".flac": cls._extract_flac,
            ".opus": cls._extract_opus,
            ".wav": cls._extract_wav,
        }

        return method_map[ext](file_path)

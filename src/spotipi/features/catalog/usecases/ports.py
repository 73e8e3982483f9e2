"""Summary: Ports defining catalog use case dependencies.
Why: Decouple the builder from concrete adapters so tests and swaps stay simple."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from spotipi.shared.track_metadata import TrackMetadata


@runtime_checkable
class DirectoryListerPort(Protocol):
    """Port for enumerating recognized audio files in a directory."""

    def list(self, directory: Path) -> list[str]:
        """Return matching file base names in enumeration order."""
        ...


@runtime_checkable
class MetadataExtractorPort(Protocol):
    """Port for reading embedded metadata from one audio file."""

    def extract(self, file_path: Path) -> TrackMetadata:
        """Return metadata for ``file_path`` or raise on any per-file fault."""
        ...


__all__ = ["DirectoryListerPort", "MetadataExtractorPort"]

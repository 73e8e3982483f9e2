# Where: spotipi.shared.track
# What: Output-ready Track record returned by a catalog build.
# Why: One immutable shape shared by the builder, the HTTP route and the CLI.

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import PurePath
from typing import Final

from .track_metadata import TrackMetadata

UNKNOWN_ARTIST: Final[str] = "Unknown Artist"
UNKNOWN_ALBUM: Final[str] = "Unknown Album"


@dataclass(frozen=True, slots=True)
class Track:
    """Normalized description of one audio file."""

    id: str
    title: str
    artist: str
    album: str
    duration: int
    filepath: str

    @classmethod
    def from_metadata(cls, file_name: str, metadata: TrackMetadata, public_prefix: str) -> Track:
        """Build a record from extracted metadata, defaulting absent fields one by one."""

        return cls(
            id=file_name,
            title=metadata.title if metadata.title is not None else strip_extension(file_name),
            artist=metadata.artist if metadata.artist is not None else UNKNOWN_ARTIST,
            album=metadata.album if metadata.album is not None else UNKNOWN_ALBUM,
            duration=metadata.duration_seconds if metadata.duration_seconds is not None else 0,
            filepath=public_filepath(public_prefix, file_name),
        )

    @classmethod
    def fallback(cls, file_name: str, public_prefix: str) -> Track:
        """Build a record using only information derivable from the file name."""

        return cls.from_metadata(file_name, TrackMetadata(), public_prefix)

    def to_dict(self) -> dict[str, str | int]:
        """Return the JSON-ready mapping in wire field order."""

        return asdict(self)


def strip_extension(file_name: str) -> str:
    """Return ``file_name`` without its final suffix (``a.b.mp3`` -> ``a.b``)."""

    return PurePath(file_name).stem


def public_filepath(public_prefix: str, file_name: str) -> str:
    """Return the public path the static file server resolves for ``file_name``."""

    return f"{public_prefix.rstrip('/')}/{file_name}"


__all__ = [
    "Track",
    "UNKNOWN_ALBUM",
    "UNKNOWN_ARTIST",
    "public_filepath",
    "strip_extension",
]

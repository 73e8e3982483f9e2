# Where: spotipi.shared.track_metadata
# What: Raw metadata read from one audio file before defaulting.
# Why: ``None`` marks an absent tag so defaults never overwrite a present empty value.

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackMetadata:
    """Metadata for a music track."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    duration_seconds: int | None = None


__all__ = ["TrackMetadata"]

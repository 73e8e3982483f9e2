# Where: spotipi.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of the track shapes across features.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .track import UNKNOWN_ALBUM, UNKNOWN_ARTIST, Track
from .track_metadata import TrackMetadata

__all__ = ["Track", "TrackMetadata", "UNKNOWN_ALBUM", "UNKNOWN_ARTIST"]

"""
Summary: Public surface for metadata extraction modules.
Why: Provide a stable import path for the catalog builder and tests.
"""

from .format_extractors import (
    FlacExtractor,
    Mp3Extractor,
    OpusExtractor,
    WavExtractor,
)
from .track_metadata_extractor import MetadataExtractor

__all__ = [
    "MetadataExtractor",
    "Mp3Extractor",
    "FlacExtractor",
    "OpusExtractor",
    "WavExtractor",
]

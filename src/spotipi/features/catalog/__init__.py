# Where: spotipi.features.catalog.__init__
# What: Expose catalog services and shared dataclasses.
# Why: Provide a cohesive import surface for the HTTP and CLI layers.

from spotipi.shared import Track, TrackMetadata
from .usecases import (
    DIRECTORY_ERROR_MESSAGE,
    CatalogBuildError,
    CatalogEvent,
    DirectoryLister,
    ExtractionTimeoutError,
    MetadataExtractor,
    TrackCatalogBuilder,
)
from .usecases.ports import DirectoryListerPort, MetadataExtractorPort

__all__ = [
    "Track",
    "TrackMetadata",
    "TrackCatalogBuilder",
    "DirectoryLister",
    "MetadataExtractor",
    "CatalogBuildError",
    "CatalogEvent",
    "DIRECTORY_ERROR_MESSAGE",
    "ExtractionTimeoutError",
    "DirectoryListerPort",
    "MetadataExtractorPort",
]

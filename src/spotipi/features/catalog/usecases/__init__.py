"""Summary: Catalog use cases: listing, extraction and the track catalog builder.
Why: Keep orchestration importable without pulling in interface layers."""

from .catalog_builder import ExtractionOutcome, TrackCatalogBuilder
from .catalog_types import (
    DIRECTORY_ERROR_MESSAGE,
    CatalogBuildContext,
    CatalogBuildError,
    CatalogEvent,
    ExtractionTimeoutError,
)
from .extraction import MetadataExtractor
from .listing import DirectoryLister
from .ports import DirectoryListerPort, MetadataExtractorPort

__all__ = [
    "CatalogBuildContext",
    "CatalogBuildError",
    "CatalogEvent",
    "DIRECTORY_ERROR_MESSAGE",
    "DirectoryLister",
    "DirectoryListerPort",
    "ExtractionOutcome",
    "ExtractionTimeoutError",
    "MetadataExtractor",
    "MetadataExtractorPort",
    "TrackCatalogBuilder",
]

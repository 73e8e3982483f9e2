"""src/spotipi/features/catalog/usecases/catalog_types.py
Where: Catalog feature usecases layer.
What: Shared enums, errors and bookkeeping for catalog builds.
Why: Keep the builder lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

DIRECTORY_ERROR_MESSAGE = "Failed to read music directory"


class CatalogEvent(StrEnum):
    """Structured event identifiers for catalog build logs."""

    BUILD_START = "catalog.build.start"
    BUILD_COMPLETE = "catalog.build.complete"
    BUILD_ERROR = "catalog.build.error"
    FILE_FALLBACK = "catalog.file.fallback"
    FILE_TIMEOUT = "catalog.file.timeout"


class CatalogBuildError(Exception):
    """Raised when the music directory itself cannot be read."""

    def __init__(self, directory: Path, message: str = DIRECTORY_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.directory: Path = directory
        self.message: str = message

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is not None:
            return f"{self.message}: {self.directory} ({cause})"
        return f"{self.message}: {self.directory}"


class ExtractionTimeoutError(TimeoutError):
    """Raised in place of a result when extraction misses the build deadline."""

    def __init__(self, file_path: Path, timeout: float) -> None:
        super().__init__(f"Metadata extraction exceeded {timeout:.2f}s for {file_path.name}")
        self.file_path: Path = file_path
        self.timeout: float = timeout


@dataclass(slots=True)
class CatalogBuildContext:
    """Mutable bookkeeping for one catalog build."""

    build_id: str
    directory: Path
    total_files: int = 0
    extracted: int = 0
    fallbacks: int = 0
    start_time: float = field(default_factory=time.perf_counter)

    def record_success(self) -> None:
        """Increment the counter of files with extracted metadata."""

        self.extracted += 1

    def record_fallback(self) -> None:
        """Increment the counter of files that used the fallback record."""

        self.fallbacks += 1

    def duration_seconds(self) -> float:
        """Return the elapsed build time in seconds."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return structured logging extras describing the build."""

        return {
            "build_id": self.build_id,
            "music_dir": str(self.directory),
            "total_files": self.total_files,
            "extracted": self.extracted,
            "fallbacks": self.fallbacks,
            "duration_seconds": round(self.duration_seconds(), 3),
        }


__all__ = [
    "CatalogBuildContext",
    "CatalogBuildError",
    "CatalogEvent",
    "DIRECTORY_ERROR_MESSAGE",
    "ExtractionTimeoutError",
]

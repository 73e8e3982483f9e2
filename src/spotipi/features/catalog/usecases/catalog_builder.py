"""src/spotipi/features/catalog/usecases/catalog_builder.py
What: Build the ordered Track list for one music directory.
Why: Fan metadata extraction out across files while keeping one bad file from failing the request.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections import deque
from collections.abc import Callable, Iterable, Mapping, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import TYPE_CHECKING

from spotipi.config.config import (
    DEFAULT_EXTRACTION_TIMEOUT,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PUBLIC_PREFIX,
)
from spotipi.platform.logging import logger
from spotipi.shared.track import Track
from spotipi.shared.track_metadata import TrackMetadata

from .catalog_types import (
    CatalogBuildContext,
    CatalogBuildError,
    CatalogEvent,
    ExtractionTimeoutError,
)
from .extraction import MetadataExtractor
from .listing import DirectoryLister
from .ports import DirectoryListerPort, MetadataExtractorPort

if TYPE_CHECKING:
    from spotipi.config.settings import CatalogSettings

# Either the extracted metadata or the error that replaced it.
ExtractionOutcome = TrackMetadata | BaseException

# How often to re-check a submitted task that has not reached a worker yet.
_START_POLL_SECONDS = 0.05


def _default_executor(workers: int) -> ThreadPoolExecutor:
    return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="catalog-extract")


class TrackCatalogBuilder:
    """Turn a directory listing into Track records, one per matched file.

    Each build lists the directory once, extracts files on a bounded worker
    pool and waits for all of them. Any per-file error (including missing the
    extraction deadline) is replaced with a name-only fallback record. Only a
    failure to read the directory itself reaches the caller.
    """

    def __init__(
        self,
        lister: DirectoryListerPort | None = None,
        extractor: MetadataExtractorPort | None = None,
        *,
        public_prefix: str = DEFAULT_PUBLIC_PREFIX,
        max_workers: int = DEFAULT_MAX_WORKERS,
        extraction_timeout: float | None = DEFAULT_EXTRACTION_TIMEOUT,
        executor_factory: Callable[[int], ThreadPoolExecutor] | None = None,
    ) -> None:
        self.lister: DirectoryListerPort = lister or DirectoryLister()
        self.extractor: MetadataExtractorPort = extractor or MetadataExtractor
        self.public_prefix: str = public_prefix
        self.max_workers: int = max(1, max_workers)
        self.extraction_timeout: float | None = extraction_timeout
        self._executor_factory: Callable[[int], ThreadPoolExecutor] = (
            executor_factory or _default_executor
        )

    @classmethod
    def from_settings(cls, settings: CatalogSettings) -> TrackCatalogBuilder:
        """Create a builder wired to the mutagen extractor and configured suffixes."""

        return cls(
            DirectoryLister(settings.extensions),
            MetadataExtractor,
            public_prefix=settings.public_prefix,
            max_workers=settings.max_workers,
            extraction_timeout=settings.extraction_timeout,
        )

    def build(self, directory: Path) -> list[Track]:
        """Build the catalog for ``directory``.

        Args:
            directory: Music directory to scan.

        Returns:
            list[Track]: One record per matched file, in listing order.

        Raises:
            CatalogBuildError: If the directory cannot be listed.
        """
        directory = Path(directory)
        context = CatalogBuildContext(build_id=uuid.uuid4().hex[:12], directory=directory)

        try:
            file_names = self.lister.list(directory)
        except CatalogBuildError as exc:
            self._log(
                logging.ERROR,
                CatalogEvent.BUILD_ERROR,
                "Error reading music directory [id=%s, path=%s, error=%s]",
                context.build_id,
                directory,
                exc.__cause__ or exc,
                **context.summary_extra(),
            )
            raise

        context.total_files = len(file_names)
        self._log(
            logging.INFO,
            CatalogEvent.BUILD_START,
            "Catalog build started [id=%s, files=%d, path=%s]",
            context.build_id,
            context.total_files,
            directory,
            **context.summary_extra(),
        )

        outcomes = self._extract_all(directory, file_names)

        tracks: list[Track] = []
        for file_name, outcome in zip(file_names, outcomes, strict=True):
            if isinstance(outcome, TrackMetadata):
                context.record_success()
                tracks.append(Track.from_metadata(file_name, outcome, self.public_prefix))
                continue

            context.record_fallback()
            event = (
                CatalogEvent.FILE_TIMEOUT
                if isinstance(outcome, ExtractionTimeoutError)
                else CatalogEvent.FILE_FALLBACK
            )
            self._log(
                logging.WARNING,
                event,
                "Error parsing metadata for %s: %s",
                file_name,
                str(outcome) or type(outcome).__name__,
                build_id=context.build_id,
                file_path=directory / file_name,
                music_dir=str(directory),
                error_type=type(outcome).__name__,
            )
            tracks.append(Track.fallback(file_name, self.public_prefix))

        summary = context.summary_extra()
        self._log(
            logging.INFO,
            CatalogEvent.BUILD_COMPLETE,
            "Catalog build completed [id=%s, tracks=%d, fallbacks=%d, duration=%.2fs]",
            context.build_id,
            len(tracks),
            context.fallbacks,
            summary["duration_seconds"],
            **summary,
        )
        return tracks

    def _extract_all(self, directory: Path, file_names: Sequence[str]) -> list[ExtractionOutcome]:
        """Run one extraction per file and return outcomes in ``file_names`` order.

        At most ``workers`` files are in flight at once. Each file's deadline
        starts when its extraction starts running, so files waiting for a
        worker never use up their budget. A timed-out file is abandoned on its
        thread and later files move to a fresh executor, so a hung file costs
        only its own slot.
        """

        if not file_names:
            return []

        paths = [directory / name for name in file_names]
        workers = min(self.max_workers, len(paths))
        timeout = self.extraction_timeout
        outcomes: dict[int, ExtractionOutcome] = {}
        started: dict[int, float] = {}
        queued = deque(range(len(paths)))
        running: dict[Future[TrackMetadata], int] = {}

        executor = self._executor_factory(workers)
        retired: list[ThreadPoolExecutor] = []
        try:
            while queued or running:
                while queued and len(running) < workers:
                    index = queued.popleft()
                    future = executor.submit(self._run_timed, started, index, paths[index])
                    running[future] = index

                done, _ = wait(
                    list(running),
                    timeout=self._next_wait(running.values(), started, timeout),
                    return_when=FIRST_COMPLETED,
                )
                for future in done:
                    index = running.pop(future)
                    error = future.exception()
                    outcomes[index] = error if error is not None else future.result()

                if timeout is None:
                    continue
                expired = self._expired(running, started, timeout)
                for future in expired:
                    index = running.pop(future)
                    _ = future.cancel()
                    outcomes[index] = ExtractionTimeoutError(paths[index], timeout)
                if expired and queued:
                    retired.append(executor)
                    executor = self._executor_factory(workers)
        finally:
            # Hung workers are abandoned rather than joined.
            for pool in (*retired, executor):
                pool.shutdown(wait=False, cancel_futures=True)

        return [outcomes[index] for index in range(len(paths))]

    def _run_timed(self, started: dict[int, float], index: int, path: Path) -> TrackMetadata:
        started[index] = time.monotonic()
        return self.extractor.extract(path)

    @staticmethod
    def _next_wait(
        indexes: Iterable[int], started: Mapping[int, float], timeout: float | None
    ) -> float | None:
        """Seconds until the earliest running deadline, or ``None`` without a deadline."""

        if timeout is None:
            return None
        now = time.monotonic()
        remaining: list[float] = []
        for index in indexes:
            start = started.get(index)
            if start is None:
                # Submitted but not yet picked up by a worker; check again shortly.
                remaining.append(_START_POLL_SECONDS)
            else:
                remaining.append(start + timeout - now)
        return max(0.0, min(remaining)) if remaining else None

    @staticmethod
    def _expired(
        running: Mapping[Future[TrackMetadata], int],
        started: Mapping[int, float],
        timeout: float,
    ) -> list[Future[TrackMetadata]]:
        now = time.monotonic()
        return [
            future
            for future, index in running.items()
            if index in started and now - started[index] >= timeout
        ]

    def _log(
        self,
        level: int,
        event: CatalogEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        extra: dict[str, object] = {"catalog_event": event.value}
        extra.update(context)
        logger.log(level, message, *message_args, extra=extra)


__all__ = ["ExtractionOutcome", "TrackCatalogBuilder"]

"""Where: src/spotipi/config/settings.py
What: Validated runtime settings derived from persisted configuration.
Why: Hand feature layers plain values without file I/O or re-validation.
Assumptions: - Invalid values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from spotipi.config.config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_EXTRACTION_TIMEOUT,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PUBLIC_PREFIX,
    Config,
)
from spotipi.config.paths import default_music_dir, resolve_overridable_path


@dataclass(frozen=True, slots=True)
class CatalogSettings:
    """Runtime settings for one catalog-serving process."""

    music_dir: Path = field(default_factory=default_music_dir)
    public_prefix: str = DEFAULT_PUBLIC_PREFIX
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    max_workers: int = DEFAULT_MAX_WORKERS
    extraction_timeout: float | None = DEFAULT_EXTRACTION_TIMEOUT

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        music_dir: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "CatalogSettings":
        """Build settings from ``config``; ``music_dir`` wins over every other source."""

        explicit = music_dir if music_dir is not None else config.music_dir
        resolved_dir = resolve_overridable_path(
            explicit_path=explicit,
            env=env,
            env_var=None,
            default_factory=lambda: default_music_dir(env),
        )
        return cls(
            music_dir=resolved_dir,
            public_prefix=normalize_prefix(config.public_prefix),
            extensions=normalize_extensions(config.extensions),
            max_workers=(
                config.max_workers
                if isinstance(config.max_workers, int) and config.max_workers > 0
                else DEFAULT_MAX_WORKERS
            ),
            extraction_timeout=normalize_timeout(config.extraction_timeout),
        )


def normalize_prefix(prefix: str | None) -> str:
    """Return ``prefix`` with exactly one leading slash and no trailing slash."""

    cleaned = (prefix or "").strip().strip("/")
    if not cleaned:
        return DEFAULT_PUBLIC_PREFIX
    return f"/{cleaned}"


def normalize_extensions(extensions: Sequence[str] | None) -> tuple[str, ...]:
    """Return dot-prefixed, de-duplicated suffixes preserving their original case."""

    result: list[str] = []
    for raw in extensions or ():
        ext = raw.strip()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in result:
            result.append(ext)
    return tuple(result) if result else DEFAULT_EXTENSIONS


def normalize_timeout(value: float | int | str | None) -> float | None:
    """Map non-positive or non-finite timeouts to ``None`` (no deadline).

    Values that are not numbers fall back to ``DEFAULT_EXTRACTION_TIMEOUT``.
    """

    if value is None or isinstance(value, bool):
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return DEFAULT_EXTRACTION_TIMEOUT
    if not math.isfinite(timeout) or timeout <= 0:
        return None
    return timeout


__all__ = [
    "CatalogSettings",
    "normalize_extensions",
    "normalize_prefix",
    "normalize_timeout",
]

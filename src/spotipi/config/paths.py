"""Shared path utilities for configuration and data locations.

This module centralizes how the application discovers locations for
config, log and music files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml``
- Logs: repository-root ``<repo_root>/logs/spotipi.log``
- Music: repository-root ``<repo_root>/static/music`` unless overridden by
  ``SPOTIPI_MUSIC_DIR``.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


ENV_MUSIC_DIR: Final[str] = "SPOTIPI_MUSIC_DIR"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the main TOML config file.

    Portable layout: ``<repo_root>/config/config.toml``.
    """
    repo_root = _detect_repo_root()
    return (repo_root / "config" / "config.toml").resolve()


def default_music_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the music directory scanned when no explicit path is configured."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_MUSIC_DIR,
        default_factory=lambda: (_detect_repo_root() / "static" / "music").resolve(),
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "spotipi.log").resolve()


__all__ = [
    "ENV_MUSIC_DIR",
    "default_config_path",
    "default_music_dir",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]

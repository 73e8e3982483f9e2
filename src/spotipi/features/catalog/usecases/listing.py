"""Summary: Enumerate recognized audio files in the music directory.
Why: Give the catalog builder a single, ordered, non-recursive file list."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import final

from spotipi.config.config import DEFAULT_EXTENSIONS
from spotipi.platform.logging import logger

from .catalog_types import CatalogBuildError


@final
class DirectoryLister:
    """List audio file names whose suffix is on the allow-list.

    Suffix matching is case-sensitive and the result keeps the order the
    operating system enumerates entries in; nothing is sorted.
    """

    def __init__(self, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
        self.extensions: tuple[str, ...] = tuple(extensions)

    def list(self, directory: Path) -> list[str]:
        """Return matching file base names.

        Args:
            directory: Directory to enumerate (not recursed into).

        Returns:
            list[str]: File names in enumeration order.

        Raises:
            CatalogBuildError: If the directory is missing, unreadable, or not a directory.
        """
        names: list[str] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if not entry.name.endswith(self.extensions):
                        continue
                    if not entry.is_file():
                        logger.debug("Skipping non-file entry %s", entry.path)
                        continue
                    names.append(entry.name)
        except OSError as exc:
            raise CatalogBuildError(Path(directory)) from exc
        return names


__all__ = ["DirectoryLister"]

"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from spotipi.config.settings import CatalogSettings


@final
@dataclass(slots=True)
class StartArgs:
    """Command line arguments for the ``start`` subcommand."""

    command: Literal["start"]
    host: str
    port: int
    settings: CatalogSettings
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ScanArgs:
    """Command line arguments for the ``scan`` subcommand."""

    command: Literal["scan"]
    settings: CatalogSettings
    as_json: bool
    verbose: bool
    quiet: bool


CLIArgs = StartArgs | ScanArgs

__all__ = ["CLIArgs", "ScanArgs", "StartArgs"]

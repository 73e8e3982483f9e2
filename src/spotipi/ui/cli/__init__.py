"""Command line interface package."""

from spotipi.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]

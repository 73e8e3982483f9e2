"""Display management for CLI interface."""

from spotipi.ui.cli.display.catalog import CatalogDisplay, format_duration

__all__ = ["CatalogDisplay", "format_duration"]

"""src/spotipi/ui/cli/display/catalog.py
What: Render a built catalog as a rich table or as wire-format JSON.
Why: Let ``spotipi scan`` show exactly what the HTTP route would return.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table

from spotipi.shared import UNKNOWN_ALBUM, UNKNOWN_ARTIST, Track


def format_duration(seconds: int) -> str:
    """Format whole seconds as ``m:ss``."""
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes}:{secs:02d}"


@final
class CatalogDisplay:
    """Handles catalog display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_tracks(self, tracks: Sequence[Track], quiet: bool = False) -> None:
        """Display tracks as a table followed by a one-line summary.

        Args:
            tracks: Tracks in catalog order.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        table = Table(title="Track Catalog")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("Artist")
        table.add_column("Album")
        table.add_column("Duration", justify="right")
        table.add_column("File", style="cyan")

        for index, track in enumerate(tracks, start=1):
            table.add_row(
                str(index),
                track.title,
                track.artist,
                track.album,
                format_duration(track.duration),
                track.id,
            )

        self.console.print(table)
        untagged = sum(
            1
            for track in tracks
            if track.artist == UNKNOWN_ARTIST and track.album == UNKNOWN_ALBUM
        )
        self.console.print(f"Tracks: {len(tracks)}")
        if untagged:
            self.console.print(f"[yellow]Without artist/album tags: {untagged}[/yellow]")

    def show_json(self, tracks: Sequence[Track]) -> None:
        """Print tracks as the JSON array served by the HTTP route."""
        payload = json.dumps([track.to_dict() for track in tracks], ensure_ascii=False, indent=2)
        self.console.print_json(payload)

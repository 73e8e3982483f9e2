"""src/spotipi/ui/cli/commands/scan.py
What: Build the catalog once and print it.
Why: Inspect what the tracks route will serve without starting a server.
"""

from typing import override

from spotipi.features.catalog import CatalogBuildError
from spotipi.ui.cli.args.options import ScanArgs
from spotipi.ui.cli.commands.executor import CommandExecutor
from spotipi.ui.cli.display import CatalogDisplay


class ScanCommand(CommandExecutor):
    """Command for printing the catalog of a directory."""

    args: ScanArgs

    def __init__(self, args: ScanArgs) -> None:
        super().__init__(args)
        self.display = CatalogDisplay()

    @override
    def execute(self) -> int:
        try:
            tracks = self.builder.build(self.settings.music_dir)
        except CatalogBuildError:
            # Already logged by the builder.
            return 1

        if self.args.as_json:
            self.display.show_json(tracks)
        else:
            self.display.show_tracks(tracks, quiet=self.args.quiet)
        return 0

"""src/spotipi/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse catalog construction across commands.
"""

from abc import ABC, abstractmethod

from spotipi.config.settings import CatalogSettings
from spotipi.features.catalog import TrackCatalogBuilder
from spotipi.ui.cli.args.options import CLIArgs


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    settings: CatalogSettings
    builder: TrackCatalogBuilder

    def __init__(self, args: CLIArgs) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.settings = args.settings
        self.builder = TrackCatalogBuilder.from_settings(self.settings)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass

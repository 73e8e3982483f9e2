"""Command implementations for the CLI."""

from spotipi.ui.cli.commands.executor import CommandExecutor
from spotipi.ui.cli.commands.scan import ScanCommand
from spotipi.ui.cli.commands.start import StartCommand

__all__ = ["CommandExecutor", "ScanCommand", "StartCommand"]

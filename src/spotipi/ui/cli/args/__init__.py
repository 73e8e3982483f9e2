"""Command line argument handling package."""

from spotipi.ui.cli.args.parser import ArgumentParser
from spotipi.ui.cli.args.options import CLIArgs, ScanArgs, StartArgs

__all__ = ["ArgumentParser", "CLIArgs", "ScanArgs", "StartArgs"]

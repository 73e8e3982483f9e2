"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from spotipi.config.config import Config
from spotipi.config.settings import CatalogSettings
from spotipi.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from spotipi.ui.cli.args.options import CLIArgs, ScanArgs, StartArgs

MIN_PORT = 1
MAX_PORT = 65535


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="spotipi",
            description="spotipi - serve a local music directory as a track catalog.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        start_parser = subparsers.add_parser(
            "start",
            help="Start the development server",
        )
        _ = start_parser.add_argument(
            "port",
            nargs="?",
            type=str,
            help="Port to listen on (defaults to the configured port)",
            metavar="PORT",
        )
        _ = start_parser.add_argument(
            "--host",
            type=str,
            help="Interface to bind (defaults to the configured host)",
        )
        ArgumentParser._add_common_arguments(start_parser)

        scan_parser = subparsers.add_parser(
            "scan",
            help="Build the catalog once and print it",
        )
        _ = scan_parser.add_argument(
            "music_dir",
            nargs="?",
            type=str,
            help="Directory to scan (defaults to the configured music directory)",
            metavar="MUSIC_DIR",
        )
        _ = scan_parser.add_argument(
            "--json",
            action="store_true",
            dest="as_json",
            help="Print the catalog as the JSON the HTTP route returns",
        )
        ArgumentParser._add_common_arguments(scan_parser, with_music_dir=False)

        return parser

    @staticmethod
    def _add_common_arguments(
        parser: argparse.ArgumentParser, *, with_music_dir: bool = True
    ) -> None:
        if with_music_dir:
            _ = parser.add_argument(
                "--music-dir",
                type=str,
                dest="music_dir",
                help="Directory containing audio files",
                metavar="MUSIC_DIR",
            )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the port is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        settings = CatalogSettings.from_config(configuration, music_dir=parsed_args.music_dir)

        if parsed_args.command == "start":
            port = ArgumentParser._parse_port(
                parsed_args.port if parsed_args.port is not None else configuration.port
            )
            return StartArgs(
                command="start",
                host=parsed_args.host or configuration.host,
                port=port,
                settings=settings,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        return ScanArgs(
            command="scan",
            settings=settings,
            as_json=bool(parsed_args.as_json),
            verbose=is_verbose,
            quiet=is_quiet,
        )

    @staticmethod
    def _parse_port(value: str | int) -> int:
        """Parse a CLI or configured port, exiting with status 1 when it is out of range."""
        try:
            port = int(str(value), 10)
        except ValueError:
            port = 0
        if not MIN_PORT <= port <= MAX_PORT:
            logger.error(
                "Invalid port number. Please specify a port between %d and %d.",
                MIN_PORT,
                MAX_PORT,
            )
            sys.exit(1)
        return port

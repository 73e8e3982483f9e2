"""Command line interface for spotipi."""

import sys
from typing import final

from spotipi.platform.logging import logger
from spotipi.ui.cli.args import ArgumentParser
from spotipi.ui.cli.args.options import CLIArgs, ScanArgs, StartArgs
from spotipi.ui.cli.commands import ScanCommand, StartCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, StartArgs):
                exit_code = StartCommand(args).execute()
            else:
                assert isinstance(args, ScanArgs)
                exit_code = ScanCommand(args).execute()

            if exit_code != 0:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit(...)``
        from inside command processing, so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0

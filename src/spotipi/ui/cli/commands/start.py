"""src/spotipi/ui/cli/commands/start.py
What: Launch the development server for the catalog application.
Why: Replace the front-end dev server launcher with a single Python entry point.
"""

from typing import override

import uvicorn

from spotipi.platform.logging import logger
from spotipi.ui.cli.args.options import StartArgs
from spotipi.ui.cli.commands.executor import CommandExecutor
from spotipi.ui.web import TRACKS_ROUTE, create_app


class StartCommand(CommandExecutor):
    """Command for serving the catalog over HTTP."""

    args: StartArgs

    @override
    def execute(self) -> int:
        app = create_app(self.settings, self.builder)
        logger.info(
            "Serving %s on http://%s:%d%s",
            self.settings.music_dir,
            self.args.host,
            self.args.port,
            TRACKS_ROUTE,
        )
        if self.args.quiet:
            log_level = "error"
        elif self.args.verbose:
            log_level = "debug"
        else:
            log_level = "info"
        uvicorn.run(app, host=self.args.host, port=self.args.port, log_level=log_level)
        return 0

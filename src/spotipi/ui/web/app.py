"""src/spotipi/ui/web/app.py
What: FastAPI application exposing the track catalog and the music files.
Why: Serialize one fresh catalog build per request for the front-end player.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from spotipi import __version__
from spotipi.config.settings import CatalogSettings
from spotipi.features.catalog import (
    DIRECTORY_ERROR_MESSAGE,
    CatalogBuildError,
    TrackCatalogBuilder,
)
from spotipi.platform.logging import logger

TRACKS_ROUTE = "/api/tracks"


def create_app(
    settings: CatalogSettings | None = None,
    builder: TrackCatalogBuilder | None = None,
) -> FastAPI:
    """Create the catalog application.

    Args:
        settings: Runtime settings; defaults resolve the music directory from the environment.
        builder: Catalog builder; defaults to one built from ``settings``.

    Returns:
        FastAPI: Application with the tracks route and the static music mount.
    """
    settings = settings or CatalogSettings()
    builder = builder or TrackCatalogBuilder.from_settings(settings)

    app = FastAPI(title="spotipi", version=__version__)
    app.state.settings = settings
    app.state.builder = builder

    @app.get(TRACKS_ROUTE)
    def get_tracks() -> JSONResponse:
        """Return every track in the music directory."""
        try:
            tracks = builder.build(settings.music_dir)
        except CatalogBuildError:
            return JSONResponse({"error": DIRECTORY_ERROR_MESSAGE}, status_code=500)
        return JSONResponse([track.to_dict() for track in tracks])

    if settings.music_dir.is_dir():
        app.mount(
            settings.public_prefix,
            StaticFiles(directory=settings.music_dir),
            name="music",
        )
    else:
        logger.warning(
            "Music directory %s does not exist; %s will not serve files",
            settings.music_dir,
            settings.public_prefix,
        )

    return app


__all__ = ["TRACKS_ROUTE", "create_app"]

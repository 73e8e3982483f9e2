"""HTTP interface package."""

from spotipi.ui.web.app import TRACKS_ROUTE, create_app

__all__ = ["TRACKS_ROUTE", "create_app"]

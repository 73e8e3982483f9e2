"""spotipi - local track catalog for a browser music player."""

__version__ = "0.1.0"

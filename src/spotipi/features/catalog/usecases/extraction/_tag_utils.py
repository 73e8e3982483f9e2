"""Tag utility helpers.

Where: src/spotipi/features/catalog/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for tag access and duration normalisation.
Why: Keep the absent-versus-empty rules in one place for every format extractor.
"""

from __future__ import annotations

import math

__all__ = [
    "floor_duration",
    "frame_text",
    "safe_get_first",
]


def safe_get_first(data: list[str] | None, default: str | None = None) -> str | None:
    """Safely get the first element from a list or return the default.

    An empty list counts as absent; an empty string element is returned as-is.
    """
    return str(data[0]) if data else default


def frame_text(frame: object | None) -> str | None:
    """Return the first text value of an ID3 frame, or ``None`` when absent."""

    if frame is None:
        return None
    text: object = getattr(frame, "text", None)
    if text is None:
        return None
    if isinstance(text, (list, tuple)):
        return str(text[0]) if text else None
    return str(text)


def floor_duration(length: float | int | None) -> int | None:
    """Floor a stream length in seconds; ``None`` when missing, non-finite, or negative."""

    if length is None or isinstance(length, bool):
        return None
    try:
        seconds = float(length)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return math.floor(seconds)

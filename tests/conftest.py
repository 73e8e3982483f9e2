"""Shared pytest fixtures for catalog tests."""

from __future__ import annotations

import wave
from collections.abc import Callable
from pathlib import Path

import pytest

WavFactory = Callable[..., Path]


def write_wav(path: Path, seconds: float, sample_rate: int = 8000) -> Path:
    """Write a silent 16-bit mono WAV of ``seconds`` length to ``path``."""

    frames = int(sample_rate * seconds)
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(sample_rate)
        handle.writeframes(b"\x00\x00" * frames)
    return path


@pytest.fixture
def make_wav(tmp_path: Path) -> WavFactory:
    """Create real WAV files under ``tmp_path``."""

    def _make(name: str, seconds: float = 1.0, directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        return write_wav(target_dir / name, seconds)

    return _make

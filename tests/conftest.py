"""Shared test fixtures."""

from pathlib import Path

import pytest
from loguru import logger

from previewreel.ffutil import ProbeError


@pytest.fixture
def log_messages():
    """Collect loguru output for the duration of a test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def video_dir(tmp_path: Path) -> Path:
    d = tmp_path / "videos"
    d.mkdir()
    return d


@pytest.fixture
def make_files(video_dir: Path):
    """Create placeholder files with the given names inside video_dir."""

    def _make(*names: str) -> list[Path]:
        paths = []
        for name in names:
            p = video_dir / name
            p.write_bytes(b"not really a video")
            paths.append(p)
        return paths

    return _make


class FakeProbe:
    """Duration capability backed by a name -> seconds table.

    Names mapped to None raise ProbeError; the calls are recorded.
    """

    def __init__(self, durations: dict[str, int | None]):
        self.durations = durations
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> int:
        self.calls.append(path)
        seconds = self.durations[path.name]
        if seconds is None:
            raise ProbeError(path, "Invalid data found when processing input")
        return seconds


@pytest.fixture
def fake_probe():
    return FakeProbe

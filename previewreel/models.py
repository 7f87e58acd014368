"""Shared data types used across PreviewReel."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class VideoEntry:
    """One clip in the playlist: a file, its resolved duration and the window to play."""

    path: Path
    duration: int
    start: int
    length: int
    probe_failed: bool = False

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class Clip:
    """A single parsed EDL line."""

    path: str
    start: int
    length: int

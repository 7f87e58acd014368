"""Run configuration — the contract between CLI/manifest files and the engine."""

import json
import tempfile
from dataclasses import dataclass, fields
from pathlib import Path

VIDEO_EXTENSIONS = ("mp4", "mkv", "avi", "mov")
DEFAULT_OUTPUT = Path(tempfile.gettempdir()) / "playlist.edl"
DEFAULT_PLAYER = "mpv"
FALLBACK_DURATION = 15


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class RunConfig:
    """Everything one playlist run needs. Supplied once, not mutated by the engine."""

    directory: Path
    clip_length: int
    output: Path = DEFAULT_OUTPUT
    player: str = DEFAULT_PLAYER
    extensions: tuple[str, ...] = VIDEO_EXTENSIONS
    fallback_duration: int = FALLBACK_DURATION
    workers: int = 1
    seed: int | None = None

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)
        self.output = Path(self.output)
        self.extensions = tuple(self.extensions)

        if not _is_int(self.clip_length) or self.clip_length <= 0:
            raise ValueError(f"clip_length must be a positive integer, got {self.clip_length!r}")
        if not _is_int(self.fallback_duration) or self.fallback_duration < 0:
            raise ValueError(
                f"fallback_duration must be a non-negative integer, got {self.fallback_duration!r}"
            )
        if not _is_int(self.workers) or self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers!r}")
        if not self.extensions:
            raise ValueError("extensions must not be empty")
        if not isinstance(self.player, str) or not self.player:
            raise ValueError(f"player must be a command name, got {self.player!r}")


def load_manifest(path: str | Path) -> RunConfig:
    """Load and validate a run configuration from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text())

    if not isinstance(data, dict):
        raise ValueError("Manifest must be a JSON object")
    if "directory" not in data or "clip_length" not in data:
        raise ValueError("Manifest must contain 'directory' and 'clip_length' fields")

    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown manifest fields: {', '.join(unknown)}")

    try:
        return RunConfig(**data)
    except TypeError as e:
        raise ValueError(f"Invalid manifest value: {e}") from e

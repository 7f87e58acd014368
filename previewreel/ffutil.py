"""ffprobe and player subprocess helpers."""

import math
import shutil
import subprocess
from pathlib import Path


class ProbeError(RuntimeError):
    """Raised when the duration of a file cannot be determined."""

    def __init__(self, path: Path | None, detail: str):
        super().__init__(f"ffprobe failed for {path}: {detail}" if path is not None else detail)
        self.path = path
        self.detail = detail


class FFprobeNotFoundError(ProbeError):
    """Raised when the ffprobe executable itself is missing."""

    def __init__(self, path: Path | None = None, detail: str = "ffprobe not found on PATH"):
        super().__init__(path, detail)


class PlayerLaunchError(RuntimeError):
    pass


def check_ffprobe() -> None:
    """Raise FFprobeNotFoundError if ffprobe is not on PATH."""
    if shutil.which("ffprobe") is None:
        raise FFprobeNotFoundError()


def parse_duration(output: str) -> int:
    """Parse ffprobe's bare duration output, truncating toward zero.

    Raises ValueError for anything that is not a finite, non-negative number
    (ffprobe prints ``N/A`` for streams without a container duration).
    """
    value = float(output.strip())
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"not a usable duration: {output.strip()!r}")
    return int(value)


def probe_duration(input_path: Path) -> int:
    """Return the container duration of *input_path* in whole seconds."""
    cmd = [
        "ffprobe",
        "-v", "error",
        "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1",
        str(input_path),
    ]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, errors="replace")
    except FileNotFoundError as e:
        raise FFprobeNotFoundError(input_path, str(e)) from e
    except OSError as e:
        raise ProbeError(input_path, f"could not run ffprobe: {e}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise ProbeError(
            input_path, f"exit status {result.returncode}: {stderr or 'no output'}"
        )

    try:
        return parse_duration(result.stdout)
    except ValueError as e:
        raise ProbeError(
            input_path, f"could not parse duration from {result.stdout.strip()!r}"
        ) from e


def launch_player(player: str, playlist: Path) -> int:
    """Play *playlist* with *player* and wait for it to exit; return its exit code."""
    try:
        result = subprocess.run([player, str(playlist)])
    except OSError as e:
        raise PlayerLaunchError(f"could not start {player}: {e}") from e
    return result.returncode

"""Video file discovery."""

from pathlib import Path
from typing import Iterable


def has_video_extension(path: Path, extensions: Iterable[str]) -> bool:
    # Exact, case-sensitive match: "clip.MP4" is not an mp4.
    suffix = path.suffix
    return bool(suffix) and suffix[1:] in extensions


def discover_videos(directory: Path, extensions: Iterable[str]) -> list[Path]:
    """List the video files directly inside *directory*, sorted by path.

    Not recursive. Symlinks to regular files count; directories never do.
    Raises FileNotFoundError / NotADirectoryError / PermissionError as the
    underlying directory listing does.
    """
    extensions = tuple(extensions)
    directory = Path(directory)
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and has_video_extension(p, extensions)
    )

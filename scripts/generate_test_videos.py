#!/usr/bin/env python3
"""Generate a folder of synthetic test videos for trying out PreviewReel by hand.

Produces one colour-bar clip per entry in CLIPS, each with a different
duration and container, plus a zero-byte ``broken.mp4`` that ffprobe cannot
read (exercises the fallback duration):

  blue.mp4     40s
  red.mkv      12s
  green.mov     5s
  yellow.avi   25s
  "a, b.mp4"   30s   (comma in the name, exercises EDL path escaping)
"""

import subprocess
import sys
from pathlib import Path

CLIPS = [
    ("blue.mp4", "blue", 40),
    ("red.mkv", "red", 12),
    ("green.mov", "green", 5),
    ("yellow.avi", "yellow", 25),
    ("a, b.mp4", "white", 30),
]


def generate_clip(output: Path, color: str, seconds: int) -> None:
    cmd = [
        "ffmpeg", "-y",
        "-f", "lavfi", "-i", f"color=c={color}:s=320x240:d={seconds}:r=30",
        "-f", "lavfi", "-i", f"sine=f=440:d={seconds}",
        "-shortest",
        str(output),
    ]
    subprocess.run(cmd, capture_output=True, check=True)


def generate_test_videos(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name, color, seconds in CLIPS:
        generate_clip(directory / name, color, seconds)
        print(f"Generated: {directory / name} ({seconds}s)")
    (directory / "broken.mp4").write_bytes(b"")
    print(f"Generated: {directory / 'broken.mp4'} (unreadable)")


if __name__ == "__main__":
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("sample_videos")
    generate_test_videos(out)

"""Clip sampler — picks a random start offset that keeps the clip inside the video."""

import random


def max_start(duration: int, clip_length: int) -> int:
    """Latest start offset that still fits a whole clip; 0 if the video is too short."""
    return max(duration - clip_length, 0)


def sample_start(duration: int, clip_length: int, rng: random.Random) -> int:
    """Return a start offset uniformly drawn from ``[0, max_start]``.

    When the video is no longer than the clip the range collapses to 0 and
    *rng* is not consulted, so the player just runs to end-of-file.
    """
    if isinstance(clip_length, bool) or not isinstance(clip_length, int) or clip_length <= 0:
        raise ValueError(f"clip_length must be a positive integer, got {clip_length!r}")
    if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
        raise ValueError(f"duration must be a non-negative integer, got {duration!r}")

    upper = max_start(duration, clip_length)
    if upper == 0:
        return 0
    return rng.randint(0, upper)

"""Orchestrator — builds and writes one shuffled preview playlist."""

import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from loguru import logger

from previewreel import ffutil
from previewreel.analyzers.discover import discover_videos
from previewreel.analyzers.sampler import sample_start
from previewreel.editors.edl import write_edl
from previewreel.manifest import RunConfig
from previewreel.models import VideoEntry

ProbeFn = Callable[[Path], int]


class NoVideosFoundError(ValueError):
    """Raised when the directory holds no file with a video extension."""

    def __init__(self, directory: Path):
        super().__init__(f"No videos found in the specified directory: {directory}")
        self.directory = directory


@dataclass
class EngineResult:
    output_path: Path
    entries: list[VideoEntry] = field(default_factory=list)
    fallback_count: int = 0


def _resolve_duration(
    path: Path, probe: ProbeFn, fallback: int
) -> tuple[int, bool]:
    """Probe *path*, falling back to *fallback* seconds on ProbeError."""
    try:
        return probe(path), False
    except ffutil.ProbeError as e:
        logger.warning(
            "Could not get duration for {}, using {}s: {}", path, fallback, e.detail
        )
        return fallback, True


def build_playlist(
    config: RunConfig,
    probe: ProbeFn = ffutil.probe_duration,
    rng: random.Random | None = None,
    on_progress: Callable[[str, float], None] | None = None,
    videos: list[Path] | None = None,
) -> EngineResult:
    """Discover, shuffle, probe and sample every video, then write the EDL.

    Args:
        config: Validated run configuration.
        probe: Duration capability; raises ProbeError when a file can't be probed.
        rng: Randomness source for shuffling and sampling. Defaults to
            ``random.Random(config.seed)``.
        on_progress: Optional callback(stage_name, fraction_complete).
        videos: Already discovered candidates; discovered from
            ``config.directory`` when omitted.

    Raises:
        NoVideosFoundError: nothing to play; no playlist is written.
        OSError: the directory can't be listed or the playlist can't be written.
    """

    def _progress(stage: str, frac: float) -> None:
        if on_progress:
            on_progress(stage, frac)

    if rng is None:
        rng = random.Random(config.seed)

    _progress("Discovering videos", 0.0)
    if videos is None:
        videos = discover_videos(config.directory, config.extensions)
        logger.info("Found {} videos in {}", len(videos), config.directory)
    else:
        videos = list(videos)
    if not videos:
        raise NoVideosFoundError(config.directory)

    _progress("Shuffling", 0.05)
    rng.shuffle(videos)

    if probe is ffutil.probe_duration:
        try:
            ffutil.check_ffprobe()
        except ffutil.FFprobeNotFoundError:
            logger.warning(
                "ffprobe not found on PATH; every clip will use the {}s fallback duration",
                config.fallback_duration,
            )

    # --- Durations ---
    # The pool only overlaps the subprocess waits; results come back in
    # shuffled order so sampling below draws from rng identically either way.
    def resolve(path: Path) -> tuple[int, bool]:
        return _resolve_duration(path, probe, config.fallback_duration)

    _progress("Probing durations", 0.1)
    if config.workers > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as pool:
            durations = list(pool.map(resolve, videos))
    else:
        durations = [resolve(p) for p in videos]

    # --- Sampling ---
    entries: list[VideoEntry] = []
    n = len(videos)
    for i, (path, (duration, failed)) in enumerate(zip(videos, durations), 1):
        start = sample_start(duration, config.clip_length, rng)
        entry = VideoEntry(
            path=path,
            duration=duration,
            start=start,
            length=config.clip_length,
            probe_failed=failed,
        )
        logger.debug("Adding {}: start={}s", path, start)
        entries.append(entry)
        _progress(f"Sampling clips ({i}/{n})", 0.1 + 0.8 * i / n)

    # --- Write ---
    _progress("Writing playlist", 0.9)
    output_path = write_edl(config.output, entries)
    logger.info("EDL file generated: {}", output_path)

    _progress("Done", 1.0)
    return EngineResult(
        output_path=output_path,
        entries=entries,
        fallback_count=sum(1 for e in entries if e.probe_failed),
    )

"""Thin CLI entry point — builds a RunConfig, runs the engine, starts the player."""

import argparse
import dataclasses
import sys
from pathlib import Path

from previewreel import ffutil
from previewreel.analyzers.discover import discover_videos
from previewreel.engine import build_playlist
from previewreel.logging_config import configure_logging
from previewreel.manifest import DEFAULT_OUTPUT, DEFAULT_PLAYER, RunConfig, load_manifest


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"must be a positive integer number of seconds, got {value!r}"
        )
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="previewreel",
        description="Play a random fixed-length clip of every video in a folder, in shuffled order.",
    )
    parser.add_argument("directory", nargs="?", type=Path, help="Folder of videos")
    parser.add_argument("clip_length", nargs="?", type=positive_int, help="Seconds to play from each video")
    parser.add_argument("--manifest", "-m", type=Path, help="Path to a JSON run configuration")
    parser.add_argument("--output", "-o", type=Path, help=f"Playlist path (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--player", type=str, help=f"Player command (default: {DEFAULT_PLAYER})")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible playlist")
    parser.add_argument("--workers", type=positive_int, help="Probe this many files at once")
    parser.add_argument("--no-play", action="store_true", help="Only write the playlist")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every clip added")
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    names = ("directory", "clip_length", "output", "player", "seed", "workers")
    return {name: getattr(args, name) for name in names if getattr(args, name) is not None}


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "INFO")

    try:
        if args.manifest:
            config = dataclasses.replace(load_manifest(args.manifest), **_overrides(args))
        elif args.directory is not None and args.clip_length is not None:
            config = RunConfig(**_overrides(args))
        else:
            parser.print_usage()
            sys.exit(0)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        videos = discover_videos(config.directory, config.extensions)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if not videos:
        print(f"No videos found in the specified directory: {config.directory}")
        return

    print(f"Found {len(videos)} videos in {config.directory}.")
    print(f"Generating EDL file with {config.clip_length} seconds for each clip...")

    def on_progress(stage: str, frac: float) -> None:
        print(f"  [{frac:4.0%}] {stage}")

    try:
        result = build_playlist(config, on_progress=on_progress, videos=videos)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print()
    if result.fallback_count:
        print(f"  Fallback duration used for {result.fallback_count} file(s)")
    print(f"EDL file generated: {result.output_path}")

    if args.no_play:
        return

    print("Starting playback...")
    try:
        ffutil.launch_player(config.player, result.output_path)
    except ffutil.PlayerLaunchError as e:
        print(f"Error starting playback: {e}", file=sys.stderr)
        print(f"The playlist is still available at {result.output_path}", file=sys.stderr)


if __name__ == "__main__":
    main()

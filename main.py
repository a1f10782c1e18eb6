#!/usr/bin/env python3
"""
main.py – command-line entry point

    timewall SCHEDULE.xml | IMAGE.{png,jpg,jpeg} [--windowed] [--size WxH]
             [--interval SEC] [-v]

Exit status: 0 after a normal run, 1 when the argument is missing or the
schedule / image cannot be loaded.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, Tuple

import config
from app import WallpaperApp
from errors import ImageLoadError, ScheduleError
from image_cache import ImageCache
from schedule import load_timeline

logger = logging.getLogger("main")


def _size(text: str) -> Tuple[int, int]:
    try:
        w_str, h_str = text.lower().split("x")
        w, h = int(w_str), int(h_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {text!r}")
    return w, h


def _positive(text: str) -> float:
    try:
        v = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {text!r}")
    return v


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="timewall",
                                 description="Time-anchored living wallpaper")
    ap.add_argument("path", nargs="?",
                    help="schedule XML file or a single .png/.jpg/.jpeg image")
    ap.add_argument("--windowed", action="store_true",
                    help="run in a resizable window instead of fullscreen")
    ap.add_argument("--size", type=_size, default=config.WINDOWED_SIZE,
                    help="window size for --windowed (default: %(default)s)")
    ap.add_argument("--interval", type=_positive, default=config.REFRESH_INTERVAL_SEC,
                    help="seconds between schedule re-polls (default: %(default)s)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="[%(name)s] %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    if not args.path:
        ap.print_usage(sys.stderr)
        logger.error("missing schedule or image path")
        return 1

    try:
        timeline = load_timeline(args.path)
    except ScheduleError as exc:
        logger.error("failed to load %s: %s", args.path, exc)
        return 1

    cache = ImageCache()
    if timeline.still:
        # a bare image that does not decode is fatal, unlike a missing frame
        # in a running schedule
        try:
            cache.get_or_load(timeline[0].source)
        except ImageLoadError as exc:
            logger.error("%s", exc)
            return 1

    app = WallpaperApp(timeline, cache,
                       fullscreen=config.FULLSCREEN and not args.windowed,
                       size=args.size,
                       interval=args.interval)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

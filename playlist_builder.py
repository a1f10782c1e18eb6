"""
playlist_builder.py  – one-shot 24 h schedule creator

Scans a folder of pictures and writes a schedule where every image is held,
then cross-fades into the next one (the last wraps to the first).  Static
slots share whatever the transitions leave of one day, so the cycle is
always 24 h regardless of how many images there are.
"""
from __future__ import annotations

import logging
import os
import sys
import typing as _t

import config
from errors import (BuilderError, InsufficientImagesError,
                    InvalidDirectoryError, TooManyImagesError)
from schedule import write_schedule
from timeline import Event, Static, Timeline, Transition

logger = logging.getLogger("playlist_builder")


# ---------- scan ----------------------------------------------------------
def collect_images(folder: str) -> list[str]:
    """Regular image files directly inside *folder*, sorted by path."""
    if not os.path.isdir(folder):
        raise InvalidDirectoryError(f"not a directory: {folder!r}")

    images = [os.path.join(folder, name) for name in os.listdir(folder)
              if name.lower().endswith(config.IMAGE_EXTENSIONS)
              and os.path.isfile(os.path.join(folder, name))]
    images.sort()
    return images


def static_duration(count: int) -> int:
    """Seconds per still so that count × (still + transition) fills a day."""
    return (config.SECONDS_IN_DAY - count * config.TRANSITION_DURATION) // count


# ---------- build ---------------------------------------------------------
def build_timeline(images: _t.Sequence[str]) -> Timeline:
    if len(images) < config.MIN_BUILDER_IMAGES:
        raise InsufficientImagesError(
            f"need at least {config.MIN_BUILDER_IMAGES} images, found {len(images)}")

    hold = static_duration(len(images))
    if hold <= 0:
        raise TooManyImagesError(
            f"{len(images)} images × {config.TRANSITION_DURATION}s transitions "
            f"leave no time for stills in a {config.SECONDS_IN_DAY}s cycle")

    events: list[Event] = []
    for i, cur in enumerate(images):
        nxt = images[(i + 1) % len(images)]
        events.append(Static(hold, cur))
        events.append(Transition(config.TRANSITION_DURATION, cur, nxt,
                                 kind=config.TRANSITION_TYPE))

    return Timeline(events, config.BUILDER_ANCHOR.timestamp())


def build_schedule(folder: str, output: str | None = None) -> str:
    """Scan *folder*, write the schedule, return its path."""
    if output is None:
        output = os.path.join(folder, config.BUILDER_OUTPUT_NAME)

    logger.info("scanning %s …", folder)
    images = collect_images(folder)
    timeline = build_timeline(images)
    try:
        write_schedule(timeline, output)
    except OSError as exc:
        raise BuilderError(f"failed to write schedule to {output!r}: {exc}") from exc

    logger.info("%d images, %ds each + %ds transitions → %s",
                len(images), static_duration(len(images)),
                config.TRANSITION_DURATION, output)
    return output


# -------------------------------------------------------------------------
def main(argv: _t.Sequence[str] | None = None) -> int:
    import argparse
    ap = argparse.ArgumentParser(description="Build a 24 h wallpaper schedule")
    ap.add_argument("folder", nargs="?",
                    help="folder with .jpg/.jpeg/.png images (prompted if omitted)")
    ap.add_argument("-o", "--output",
                    help=f"output file (default: FOLDER/{config.BUILDER_OUTPUT_NAME})")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    folder = args.folder
    if folder is None:
        try:
            folder = input("Enter the full path to the folder containing images: ").strip()
        except EOFError:
            folder = ""          # no terminal: reported below as an invalid directory

    try:
        path = build_schedule(folder, args.output)
    except BuilderError as exc:
        logger.error("%s", exc)
        return 1

    print(f"Dynamic wallpaper XML created at: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
errors.py

Exception hierarchy for the wallpaper player and the playlist builder.

Load-time errors (ScheduleError and subclasses, BuilderError and subclasses)
are fatal for the CLI.  Per-tick errors (DegenerateScheduleError,
ImageLoadError) are logged by the refresh loop and the previous frame stays
on screen.
"""
from __future__ import annotations


class WallpaperError(Exception):
    """Base class for everything raised on purpose by this project."""


# ── schedule loading ───────────────────────────────────────────────────────
class ScheduleError(WallpaperError):
    pass


class ScheduleFormatError(ScheduleError):
    """Schedule file unreadable, not XML, or missing / bad fields."""


class EmptyScheduleError(ScheduleError):
    """Schedule parsed fine but holds no events."""


# ── run time ───────────────────────────────────────────────────────────────
class DegenerateScheduleError(WallpaperError):
    """Cycle length is zero, so no event can be active."""


class ImageLoadError(WallpaperError):
    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        msg = f"cannot load image {source!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


# ── playlist builder ───────────────────────────────────────────────────────
class BuilderError(WallpaperError):
    pass


class InvalidDirectoryError(BuilderError):
    pass


class InsufficientImagesError(BuilderError):
    pass


class TooManyImagesError(BuilderError):
    """Static slots would shrink to zero seconds inside a 24 h cycle."""

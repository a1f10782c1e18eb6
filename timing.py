# =========  timing.py  =========
"""
Wall-clock helpers.

Schedule anchors are written as local calendar fields (year … second) and
used internally as POSIX seconds.  These helpers convert in both directions.
"""

from __future__ import annotations

import datetime
import time


def wall_clock() -> float:
    """Current time as POSIX seconds (float)."""
    return time.time()


def local_timestamp(year: int, month: int, day: int,
                    hour: int = 0, minute: int = 0, second: int = 0) -> float:
    """
    Local calendar time → POSIX seconds.
    Raises ValueError for impossible dates (month 13, day 0, …).
    """
    return datetime.datetime(year, month, day, hour, minute, second).timestamp()


def local_fields(ts: float) -> tuple[int, int, int, int, int, int]:
    """Inverse of local_timestamp(), truncated to whole seconds."""
    dt = datetime.datetime.fromtimestamp(ts)
    return dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second


def fmt_hms(sec: float) -> str:
    sec = int(max(0, sec))
    m, s = divmod(sec, 60)
    h, m = divmod(m, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"

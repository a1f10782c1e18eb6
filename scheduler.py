"""
scheduler.py

Pure wall-clock → (event, offset) lookup for a cyclic `Timeline`.

The elapsed time since the anchor is converted to micro-seconds, wrapped
into one cycle with a true modulo (Python's `%` is never negative for a
positive divisor), and looked up in the cumulative start table with `bisect`.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Optional

from errors import DegenerateScheduleError
from timeline import TICK_HZ, Event, Timeline, Transition


@dataclass(frozen=True)
class ScheduleResult:
    index: int
    elapsed: float              # seconds into events[index]
    event: Event

    @property
    def progress(self) -> Optional[float]:
        """Blend fraction for a transition, None for a static event."""
        if isinstance(self.event, Transition):
            return self.event.progress(self.elapsed)
        return None


def resolve(timeline: Timeline, anchor: float, now: float) -> ScheduleResult:
    """
    Return the event active at *now* for a cycle that started at *anchor*.

    Intervals are half-open `[start, start + duration)`, so on an exact
    boundary the next event wins and zero-length events are never picked.
    Anchors in the future are fine: the position is still wrapped into
    `[0, total)`.
    """
    if timeline.still:
        return ScheduleResult(0, 0.0, timeline[0])

    total_us = timeline.total_us
    if total_us <= 0:
        raise DegenerateScheduleError("timeline cycle length is zero")

    elapsed_us = int(round((now - anchor) * TICK_HZ))
    rel_us = elapsed_us % total_us

    idx = bisect.bisect_right(timeline.start_us, rel_us) - 1
    if idx < 0 or idx >= len(timeline) or \
            rel_us >= timeline.start_us[idx] + timeline.durations_us[idx]:
        # should not happen after the modulo above
        return ScheduleResult(0, 0.0, timeline[0])

    return ScheduleResult(idx, (rel_us - timeline.start_us[idx]) / TICK_HZ, timeline[idx])

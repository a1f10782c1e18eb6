"""
timeline.py

Immutable, cyclic playlist of wallpaper events anchored to wall-clock time.

* Events are a two-shape sum type: `Static` (one image held on screen) and
  `Transition` (cross-fade between two images).
* Durations, the cumulative `start_us` table and the cycle total are kept in
  integer micro-seconds (`TICK_HZ`) so modulo arithmetic never drifts.
* `Timeline.from_image()` builds the "still" timeline used when the input is
  a single picture instead of a schedule.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from errors import EmptyScheduleError, ScheduleFormatError

# ── Timing ──────────────────────────────────────────────────────────────────
TICK_HZ = 1_000_000          # micro-seconds per second


# ── Events ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Static:
    duration: float
    source: str

    def sources(self) -> Tuple[str, ...]:
        return (self.source,)


@dataclass(frozen=True)
class Transition:
    duration: float
    from_source: str
    to_source: str
    kind: str = "overlay"        # schedule `type` attribute, informational only

    def sources(self) -> Tuple[str, ...]:
        return (self.from_source, self.to_source)

    def progress(self, elapsed: float) -> float:
        """Blend fraction for *elapsed* seconds into the transition, in [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return max(0.0, min(1.0, elapsed / self.duration))


Event = Union[Static, Transition]


def _to_us(seconds: float) -> int:
    return int(round(seconds * TICK_HZ))


# ── Timeline ────────────────────────────────────────────────────────────────
class Timeline:
    """Ordered events + anchor (POSIX seconds).  Read-only once built."""

    def __init__(self, events: Sequence[Event], anchor: float) -> None:
        events = tuple(events)
        if not events:
            raise EmptyScheduleError("timeline has no events")

        self._events: Tuple[Event, ...] = events
        self._anchor = float(anchor)
        self._still = any(isinstance(e.duration, float) and e.duration == math.inf
                          for e in events)

        if self._still and len(events) != 1:
            raise ScheduleFormatError("only a single-image timeline may be unbounded")

        durations_us: List[int] = []
        if not self._still:
            for i, ev in enumerate(events):
                if isinstance(ev.duration, bool) or \
                        not isinstance(ev.duration, (int, float)) or math.isnan(ev.duration):
                    raise ScheduleFormatError(f"event {i}: non-numeric duration {ev.duration!r}")
                if ev.duration < 0:
                    raise ScheduleFormatError(f"event {i}: negative duration {ev.duration}")
                durations_us.append(_to_us(ev.duration))

        start_us = [0]
        for d in durations_us[:-1]:
            start_us.append(start_us[-1] + d)

        self.durations_us: Tuple[int, ...] = tuple(durations_us)
        self.start_us: Tuple[int, ...] = tuple(start_us) if durations_us else (0,)
        self.total_us: int = sum(durations_us)

    # ---------------------------------------------------------------- builders
    @classmethod
    def from_image(cls, path: str) -> "Timeline":
        """One `Static` event with unbounded duration; progress never applies."""
        return cls((Static(math.inf, str(path)),), anchor=0.0)

    # ------------------------------------------------------------- properties
    @property
    def anchor(self) -> float:
        return self._anchor

    @property
    def still(self) -> bool:
        return self._still

    @property
    def events(self) -> Tuple[Event, ...]:
        return self._events

    def total_duration(self) -> float:
        """Cycle length in seconds (`math.inf` for a still timeline)."""
        if self._still:
            return math.inf
        return self.total_us / TICK_HZ

    # ---------------------------------------------------------- sequence API
    def __len__(self) -> int:
        return len(self._events)

    def __getitem__(self, idx: int) -> Event:
        return self._events[idx]

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __repr__(self) -> str:
        return (f"Timeline(events={len(self._events)}, "
                f"total={self.total_duration()}s, anchor={self._anchor})")

"""
refresh.py – tick / redraw driver for the wallpaper

RefreshLoop has no event loop of its own.  Whoever drives it (the pygame
window in app.py, a test, a manual stepper) calls:

    tick(now)      re-resolve the schedule, fetch images, composite
    redraw(target) re-composite the last frame, schedule untouched
    poll(now)      tick() if the refresh interval has elapsed

All mutable runtime state lives in a RefreshState owned by the loop.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import pygame

import config
from errors import DegenerateScheduleError, ImageLoadError
from image_cache import ImageCache
from renderer import Blend, Frame, Single, render
from scheduler import ScheduleResult, resolve
from timeline import Static, Timeline
from timing import fmt_hms, wall_clock

logger = logging.getLogger(__name__)


@dataclass
class RefreshState:
    result: Optional[ScheduleResult] = None    # last successful resolve
    frame: Optional[Frame] = None              # last composited frame
    next_tick_at: Optional[float] = None       # None → no recurring timer
    ticks: int = 0
    renders: int = 0


class RefreshLoop:
    def __init__(self,
                 timeline: Timeline,
                 target: pygame.Surface,
                 cache: Optional[ImageCache] = None,
                 *,
                 interval: float = config.REFRESH_INTERVAL_SEC,
                 clock: Callable[[], float] = wall_clock) -> None:
        if interval <= 0:
            raise ValueError(f"refresh interval must be > 0, got {interval}")
        self.timeline = timeline
        self.target   = target
        self.cache    = cache if cache is not None else ImageCache()
        self.interval = interval
        self.clock    = clock
        self.state    = RefreshState()

        # first frame reflects "now", not the first timer expiry
        self.tick()

    # ── triggers ────────────────────────────────────────────────────────────
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Timer path.  Returns True when a new frame was drawn.  A zero-length
        cycle or an undecodable image skips the render and keeps the prior
        frame on screen.
        """
        if now is None:
            now = self.clock()
        self.state.ticks += 1
        self.state.next_tick_at = None if self.timeline.still else now + self.interval

        try:
            result = resolve(self.timeline, self.timeline.anchor, now)
        except DegenerateScheduleError as exc:
            logger.warning("tick skipped: %s", exc)
            return False

        try:
            frame = self._frame_for(result)
        except ImageLoadError as exc:
            logger.warning("tick skipped, keeping previous frame: %s", exc)
            return False

        self.state.result = result
        self.state.frame  = frame
        self._render(frame)

        if isinstance(result.event, Static):
            logger.debug("event %d static +%s", result.index, fmt_hms(result.elapsed))
        else:
            logger.debug("event %d transition +%s (%.1f%%)", result.index,
                         fmt_hms(result.elapsed), 100.0 * result.progress)
        return True

    def redraw(self, target: Optional[pygame.Surface] = None) -> bool:
        """
        Expose / resize path: composite the last known frame again, optionally
        onto a new target surface.  The schedule is not consulted.
        """
        if target is not None:
            self.target = target
        if self.state.frame is None:
            return False
        self._render(self.state.frame)
        return True

    def due(self, now: Optional[float] = None) -> bool:
        if self.state.next_tick_at is None:
            return False
        if now is None:
            now = self.clock()
        return now >= self.state.next_tick_at

    def poll(self, now: Optional[float] = None) -> bool:
        """Tick if the interval has elapsed.  True when a frame was drawn."""
        if now is None:
            now = self.clock()
        if not self.due(now):
            return False
        return self.tick(now)

    # ── internals ───────────────────────────────────────────────────────────
    def _frame_for(self, result: ScheduleResult) -> Frame:
        ev = result.event
        if isinstance(ev, Static):
            return Single(self.cache.get_or_load(ev.source))
        return Blend(self.cache.get_or_load(ev.from_source),
                     self.cache.get_or_load(ev.to_source),
                     result.progress)

    def _render(self, frame: Frame) -> None:
        render(self.target, frame)
        self.state.renders += 1

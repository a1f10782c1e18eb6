#!/usr/bin/env python3
"""
app.py – pygame window around the RefreshLoop

Owns the display surface and the main loop.  Rendering only happens on a
schedule tick (every config.REFRESH_INTERVAL_SEC) or when the window is
exposed / resized; in between the loop just drains events at POLL_FPS.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import pygame

import config
from events       import EventManager
from image_cache  import ImageCache
from refresh      import RefreshLoop
from timeline     import Timeline

logger = logging.getLogger(__name__)


class WallpaperApp:
    def __init__(self,
                 timeline: Timeline,
                 cache: Optional[ImageCache] = None,
                 *,
                 fullscreen: bool = config.FULLSCREEN,
                 size: Tuple[int, int] = config.WINDOWED_SIZE,
                 interval: float = config.REFRESH_INTERVAL_SEC):
        # window ----------------------------------------------------------
        pygame.display.init()
        pygame.display.set_caption(config.WINDOW_TITLE)
        self.fullscreen = fullscreen
        self.screen = self._set_mode(size)
        pygame.mouse.set_visible(False)
        self.clock = pygame.time.Clock()

        # core state ------------------------------------------------------
        self.loop = RefreshLoop(timeline, self.screen,
                                cache if cache is not None else ImageCache(),
                                interval=interval)
        pygame.display.flip()
        logger.info("window %dx%d, %s", *self.screen.get_size(),
                    "still image" if timeline.still
                    else f"refresh every {interval:g}s")

    def _set_mode(self, size: Tuple[int, int]) -> pygame.Surface:
        if self.fullscreen:
            return pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        return pygame.display.set_mode(size, pygame.RESIZABLE)

    # ── action dispatch ───────────────────────────────────────────────────
    def handle(self, act: dict) -> bool:
        """Apply one action.  Returns False when the app should stop."""
        t = act["type"]
        if t == "quit":
            return False
        if t == "resize":
            size = tuple(act["size"])
            if not self.fullscreen and size != self.screen.get_size():
                self.screen = self._set_mode(size)
            else:
                # fullscreen or unchanged size: the display surface is reused
                self.screen = pygame.display.get_surface() or self.screen
            if self.loop.redraw(self.screen):
                pygame.display.flip()
        elif t == "redraw":
            if self.loop.redraw(self.screen):
                pygame.display.flip()
        return True

    # ── main loop ---------------------------------------------------------
    def run(self) -> None:
        running = True
        while running:
            for e in pygame.event.get():
                EventManager.handle(e)

            while running and (act := EventManager.poll()):
                running = self.handle(act)

            if running and self.loop.poll():
                pygame.display.flip()

            self.clock.tick(config.POLL_FPS)

        pygame.display.quit()

"""
Shared pytest fixtures.

Rendering tests run against plain pygame Surfaces; the SDL dummy video driver
keeps anything that touches pygame.display headless.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from events import EventManager
from timeline import Static, Timeline, Transition

T0 = 1_000_000_000.0    # arbitrary anchor, POSIX seconds

RED   = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE  = (0, 0, 255)


def solid(size, color):
    """32-bit surface filled with one colour."""
    surf = pygame.Surface(size, 0, 32)
    surf.fill(color)
    return surf


class CountingLoader:
    """Loader double: returns solid surfaces and records every decode."""

    def __init__(self, colors=None, size=(40, 20), fail=()):
        self.colors = colors or {}
        self.size = size
        self.fail = set(fail)
        self.calls = []

    def __call__(self, source):
        self.calls.append(source)
        if source in self.fail:
            raise pygame.error(f"cannot decode {source}")
        return solid(self.size, self.colors.get(source, RED))

    def count(self, source):
        return self.calls.count(source)


@pytest.fixture
def loader():
    return CountingLoader(colors={"a.png": RED, "b.png": BLUE, "c.png": GREEN})


@pytest.fixture
def two_event_timeline():
    """Static(10, a) then Transition(20, a→b); cycle 30 s anchored at T0."""
    return Timeline([Static(10, "a.png"), Transition(20, "a.png", "b.png")], T0)


@pytest.fixture
def make_png(tmp_path):
    def _make(name, size=(32, 16), color=RED, folder=None):
        path = (folder or tmp_path) / name
        pygame.image.save(solid(size, color), str(path))
        return str(path)
    return _make


@pytest.fixture(autouse=True)
def _empty_event_queue():
    EventManager.clear()
    yield
    EventManager.clear()

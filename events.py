"""
events.py

Turns window-system input into the small set of actions the wallpaper
reacts to, and queues them for the main loop in app.py:

    {"type": "quit"}                     window closed, Esc or q
    {"type": "redraw"}                   surface exposed / shown again
    {"type": "resize", "size": (w, h)}   surface changed size

The queue is a `queue.Queue`, so a helper thread (signal handler, remote
trigger) may `post()` actions too; only the main loop consumes them.
"""

from __future__ import annotations
import queue

import pygame

Action = dict

_QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

# SDL2 window events; older pygame builds only have the VIDEO* pair
_EXPOSE_TYPES = {pygame.VIDEOEXPOSE} | {
    getattr(pygame, n) for n in ("WINDOWEXPOSED", "WINDOWSHOWN", "WINDOWRESTORED")
    if hasattr(pygame, n)
}
_SIZE_CHANGED = getattr(pygame, "WINDOWSIZECHANGED", None)


def translate(event) -> Action | None:
    """Map one pygame event to an action, or None when it is irrelevant."""
    kind = event.type
    if kind == pygame.QUIT or (kind == pygame.KEYDOWN and event.key in _QUIT_KEYS):
        return {"type": "quit"}
    if kind == pygame.VIDEORESIZE:
        return {"type": "resize", "size": tuple(event.size)}
    if _SIZE_CHANGED is not None and kind == _SIZE_CHANGED:
        # fullscreen toggles and monitor changes arrive only as this one
        return {"type": "resize", "size": (event.x, event.y)}
    if kind in _EXPOSE_TYPES:
        return {"type": "redraw"}
    return None


class EventManager:
    """Process-wide action queue shared by the window and helper threads."""

    _pending: "queue.Queue[Action]" = queue.Queue()

    @classmethod
    def handle(cls, event) -> None:
        act = translate(event)
        if act is not None:
            cls._pending.put(act)

    @classmethod
    def post(cls, action: Action) -> None:
        cls._pending.put(action)

    @classmethod
    def poll(cls) -> Action | None:
        """Next pending action, or None when the queue is drained."""
        try:
            return cls._pending.get_nowait()
        except queue.Empty:
            return None

    @classmethod
    def clear(cls) -> None:
        while cls.poll() is not None:
            pass

"""
image_cache.py

Small LRU of decoded wallpaper images keyed by source path.

A playlist only ever needs the current still or the two ends of the running
transition, so three slots keep the working set resident while memory stays
bounded.  Reads and inserts both count as a "use".
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Callable, List, Optional

import pygame

import config
from errors import ImageLoadError

logger = logging.getLogger(__name__)

Loader = Callable[[str], pygame.Surface]


def decode_image(source: str) -> pygame.Surface:
    """Decode *source* with pygame; raises ImageLoadError on any failure."""
    try:
        return pygame.image.load(source)
    except (pygame.error, OSError) as exc:
        raise ImageLoadError(source, str(exc)) from exc


class ImageCache:
    def __init__(self, capacity: int = config.IMAGE_CACHE_SIZE,
                 loader: Optional[Loader] = None) -> None:
        if capacity < 1:
            raise ValueError(f"cache capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._load = loader or decode_image
        self._entries: "OrderedDict[str, pygame.Surface]" = OrderedDict()

    def get_or_load(self, source: str) -> pygame.Surface:
        """
        Return the decoded image for *source*, decoding it on a miss.

        A failed decode leaves the cache exactly as it was and raises
        ImageLoadError.
        """
        image = self._entries.get(source)
        if image is not None:
            self._entries.move_to_end(source)
            logger.debug("hit  %s", source)
            return image

        try:
            image = self._load(source)
        except ImageLoadError:
            raise
        except (pygame.error, OSError) as exc:
            raise ImageLoadError(source, str(exc)) from exc
        if image is None:
            raise ImageLoadError(source, "decoder returned nothing")

        self._entries[source] = image
        logger.debug("load %s (%dx%d)", source, *image.get_size())

        if len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("evict %s", evicted)
        return image

    # ── inspection ─────────────────────────────────────────────────────────
    def keys(self) -> List[str]:
        """Cached sources, least recently used first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, source: object) -> bool:
        return source in self._entries

    def __len__(self) -> int:
        return len(self._entries)

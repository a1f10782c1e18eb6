import math
from dataclasses import dataclass
from typing import Tuple, Union

import pygame

BLACK = (0, 0, 0)


@dataclass(frozen=True)
class Single:
    image: pygame.Surface


@dataclass(frozen=True)
class Blend:
    from_image: pygame.Surface
    to_image: pygame.Surface
    progress: float


Frame = Union[Single, Blend]


def fill_rect(image_size: Tuple[int, int], target_size: Tuple[int, int]) -> pygame.Rect:
    """
    Placement of an image scaled to *cover* the target (aspect kept, excess
    cropped evenly on the long axis).  Offsets go negative when cropping.
    """
    iw, ih = image_size
    tw, th = target_size
    scale = max(tw / iw, th / ih)
    # never round below the target or a 1px seam shows
    w = max(tw, int(round(iw * scale)))
    h = max(th, int(round(ih * scale)))
    return pygame.Rect(math.floor((tw - w) / 2), math.floor((th - h) / 2), w, h)


def visible_rect(image_size: Tuple[int, int], target_size: Tuple[int, int]) -> pygame.Rect:
    """
    Part of the source image that stays on screen after cover-scaling, in
    image pixels.  Always at least 1x1 and inside the image.
    """
    iw, ih = image_size
    tw, th = target_size
    placed = fill_rect(image_size, target_size)
    sx, sy = iw / placed.w, ih / placed.h
    w = max(1, min(iw, int(round(tw * sx))))
    h = max(1, min(ih, int(round(th * sy))))
    x = min(max(0, int(round(-placed.x * sx))), iw - w)
    y = min(max(0, int(round(-placed.y * sy))), ih - h)
    return pygame.Rect(x, y, w, h)


def draw_fill(target: pygame.Surface, image: pygame.Surface, opacity: float = 1.0) -> None:
    if opacity <= 0.0:
        return
    size = target.get_size()
    # scale the visible crop only, never the full cover size
    crop = image.subsurface(visible_rect(image.get_size(), size))
    if image.get_bitsize() in (24, 32):
        surf = pygame.transform.smoothscale(crop, size)
    else:
        surf = pygame.transform.scale(crop, size)
    if opacity < 1.0:
        # surf is a fresh copy, the cached image keeps its own alpha
        surf.set_alpha(int(round(opacity * 255)))
    target.blit(surf, (0, 0))


def render(target: pygame.Surface, frame: Frame) -> None:
    """
    Compose *frame* onto `target`.

    A blend paints `from_image` opaque, then `to_image` at `progress` opacity
    on top of it (plain "over" compositing, not a weighted dissolve).
    """
    target.fill(BLACK)
    if isinstance(frame, Blend):
        draw_fill(target, frame.from_image, 1.0)
        draw_fill(target, frame.to_image, max(0.0, min(1.0, frame.progress)))
    else:
        draw_fill(target, frame.image)

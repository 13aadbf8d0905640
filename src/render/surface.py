"""Drawing surface the arena renders into.

`RenderSurface` is the whole contract the simulation depends on: a size, a
region clear and a filled rectangle. `PygameSurface` backs it with an
offscreen `pygame.Surface` the engine blits to the window each frame.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

import pygame

from config import BACKGROUND, SHADOW_COLOR, SHADOW_OFFSET


class RenderSurface(Protocol):
    width: int
    height: int

    def clear_region(self, x: float, y: float, w: float, h: float) -> None: ...

    def draw_filled_rect(self, x: float, y: float, w: float, h: float, color) -> None: ...


class PygameSurface:
    """Canvas over a `pygame.Surface` with a drop shadow under each rect."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: Tuple[int, int, int] = BACKGROUND,
        shadow_offset: int = SHADOW_OFFSET,
        shadow_color: Optional[Tuple[int, int, int, int]] = SHADOW_COLOR,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.background = pygame.Color(background)
        self.shadow_offset = int(shadow_offset)
        self.shadow_color = pygame.Color(shadow_color) if shadow_color else None
        self.canvas = pygame.Surface((self.width, self.height))
        self.canvas.fill(self.background)
        self._colors: dict = {}

    def _color(self, color) -> pygame.Color:
        # Obstacle colors repeat a lot ('#A0A0A0', 'red'); parse each once
        key = color if isinstance(color, str) else tuple(color)
        c = self._colors.get(key)
        if c is None:
            c = pygame.Color(color)
            self._colors[key] = c
        return c

    def clear_region(self, x: float, y: float, w: float, h: float) -> None:
        self.canvas.fill(self.background, pygame.Rect(int(x), int(y), int(w), int(h)))

    def draw_filled_rect(self, x: float, y: float, w: float, h: float, color) -> None:
        # Sub-unit obstacles still cover at least one pixel
        rect = pygame.Rect(round(x), round(y), max(1, round(w)), max(1, round(h)))
        if self.shadow_color is not None and self.shadow_offset:
            shadow = pygame.Surface(rect.size, pygame.SRCALPHA)
            shadow.fill(self.shadow_color)
            self.canvas.blit(shadow, rect.move(self.shadow_offset, self.shadow_offset))
        self.canvas.fill(self._color(color), rect)

    def blit_to(self, screen: pygame.Surface, dest: Tuple[int, int] = (0, 0)) -> None:  # pragma: no cover - visual
        screen.blit(self.canvas, dest)


__all__ = ["RenderSurface", "PygameSurface"]

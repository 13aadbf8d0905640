"""Simple text rendering with pygame fonts.

Provides a small API to draw 2D text in screen space on top of the arena.
Rendered glyph surfaces are cached and dynamic labels (e.g., the running
timer) reuse a keyed slot that only re-renders when the text changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Optional

import pygame


@dataclass
class _TextSlot:
    surface: Optional[pygame.Surface]
    last_text: str | None = None
    last_color: Tuple[int, ...] | None = None


class TextRenderer:
    """2D text renderer blitting pygame.font surfaces.

    - draw_text() can take a `key` to reuse a slot for dynamic text.
    - Without a key, content is cached by (text, color) and reused.
    """

    def __init__(
        self,
        font: Optional[pygame.font.Font] = None,
        size: int = 24,
    ) -> None:
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
        self.font = font
        self._cache: Dict[Tuple[str, Tuple[int, ...]], pygame.Surface] = {}
        self._slots: Dict[str, _TextSlot] = {}

    # --------------------------- rendering ------------------------------
    def _surface_for(
        self, text: str, color: Tuple[int, ...], key: Optional[str]
    ) -> pygame.Surface:
        if key is not None:
            slot = self._slots.setdefault(key, _TextSlot(surface=None))
            if slot.surface is None or slot.last_text != text or slot.last_color != color:
                slot.surface = self.font.render(text, True, color)
                slot.last_text = text
                slot.last_color = color
            return slot.surface
        cache_key = (text, color)
        surf = self._cache.get(cache_key)
        if surf is None:
            surf = self.font.render(text, True, color)
            self._cache[cache_key] = surf
        return surf

    def draw_text(
        self,
        target: pygame.Surface,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, ...] = (255, 255, 255),
        *,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # returns (w, h)
        """Draw a single-line text at screen coords.

        key: supply for dynamic text; same key will reuse the slot and only
             re-render when the text changes.
        align: 'topleft' | 'topright' | 'bottomleft' | 'bottomright' | 'center'
        """
        surf = self._surface_for(text, tuple(color), key)
        w, h = surf.get_size()
        # alignment
        if align == "topright":
            draw_x, draw_y = x - w, y
        elif align == "bottomleft":
            draw_x, draw_y = x, y - h
        elif align == "bottomright":
            draw_x, draw_y = x - w, y - h
        elif align == "center":
            draw_x, draw_y = x - w / 2, y - h / 2
        else:  # topleft
            draw_x, draw_y = x, y

        target.blit(surf, (int(draw_x), int(draw_y)))
        return w, h

    def draw_text_multiline(
        self,
        target: pygame.Surface,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, ...] = (255, 255, 255),
        *,
        align: str = "topleft",
        line_spacing: float = 1.2,
    ) -> Tuple[int, int]:
        """Draw multi-line text; returns (total_w, total_h)."""
        lines = text.splitlines() if "\n" in text else [text]
        if not lines:
            return 0, 0

        line_h = self.font.get_height()
        # Measure widths without rendering
        line_widths = [self.font.size(line)[0] for line in lines]
        max_w = max(line_widths) if line_widths else 0

        n = len(lines)
        total_h = int(line_h if n == 1 else line_h + (n - 1) * line_h * line_spacing)

        # Treat 'align' as block alignment; lines are centered inside a
        # centered block and left-aligned otherwise
        if align == "center":
            start_y = y - total_h / 2
        elif align.startswith("bottom"):
            start_y = y - total_h
        else:
            start_y = y

        for i, line in enumerate(lines):
            line_y = start_y + int(i * line_h * line_spacing)
            if align == "center":
                self.draw_text(target, line, x, line_y + line_h / 2, color, align="center")
            elif align.endswith("right"):
                self.draw_text(target, line, x - max_w, line_y, color)
            else:
                self.draw_text(target, line, x, line_y, color)

        return int(max_w), int(total_h)

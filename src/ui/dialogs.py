"""Start and end-of-run overlays.

The session only signals show/hide at phase boundaries; `OverlayDialogs`
remembers what is visible and paints translucent panels over the arena when
the engine renders a frame.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

import pygame

from ui.text_renderer import TextRenderer

PANEL_COLOR = (0, 0, 0, 170)
TEXT_COLOR = (235, 235, 235)
ACCENT_COLOR = (255, 90, 90)


class DialogSignals(Protocol):
    def show_start_overlay(self) -> None: ...

    def hide_start_overlay(self) -> None: ...

    def show_end_overlay(self, score: str, best_score: str) -> None: ...

    def hide_end_overlay(self) -> None: ...


class OverlayDialogs:
    def __init__(self, panel_size: Tuple[int, int] = (420, 200)) -> None:
        self.panel_size = panel_size
        self.start_visible = False
        self.end_visible = False
        self.score_text: Optional[str] = None
        self.best_text: Optional[str] = None

    def show_start_overlay(self) -> None:
        self.start_visible = True

    def hide_start_overlay(self) -> None:
        self.start_visible = False

    def show_end_overlay(self, score: str, best_score: str) -> None:
        self.end_visible = True
        self.score_text = score
        self.best_text = best_score

    def hide_end_overlay(self) -> None:
        self.end_visible = False

    # ------------------------------------------------------------------
    def _panel(self, screen: pygame.Surface) -> pygame.Rect:
        rect = pygame.Rect((0, 0), self.panel_size)
        rect.center = screen.get_rect().center
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(PANEL_COLOR)
        screen.blit(panel, rect)
        pygame.draw.rect(screen, TEXT_COLOR, rect, width=2)
        return rect

    def draw(self, screen: pygame.Surface, text: TextRenderer) -> None:
        if self.start_visible:
            rect = self._panel(screen)
            text.draw_text(screen, "SQUARE DODGE", rect.centerx, rect.top + 45, ACCENT_COLOR, align="center")
            text.draw_text_multiline(
                screen,
                "Avoid the gray squares.\nArrow keys to move.\nEnter to start, Esc to quit.",
                rect.centerx,
                rect.centery + 25,
                TEXT_COLOR,
                align="center",
            )
        if self.end_visible:
            rect = self._panel(screen)
            text.draw_text(screen, "GAME OVER", rect.centerx, rect.top + 40, ACCENT_COLOR, align="center")
            text.draw_text_multiline(
                screen,
                f"Your score: {self.score_text}\nBest score: {self.best_text}\n"
                "Enter to play again, Esc for menu.",
                rect.centerx,
                rect.centery + 25,
                TEXT_COLOR,
                align="center",
            )


__all__ = ["DialogSignals", "OverlayDialogs"]

"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, feeds wall-clock time to the scheduler, hosts
  the active scene and flips the display.
- Session (scene): owns game state and registers its timers on the scheduler.
- Overlays: start/end dialogs painted on top of the scene.

The simulation never reads the wall clock itself; it only sees the scheduler
advancing, which keeps every game rule testable without a window.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from config import CAPTION, DISPLAY_FPS, FULLSCREEN, MAX_FRAME_MS, VSYNC
from core.scheduler import Scheduler
from dodge.session import Session
from dodge.settings import GameSettings
from render.surface import PygameSurface
from storage.best_score import BestScoreStore, JsonBestScoreStore
from ui.dialogs import OverlayDialogs
from ui.text_renderer import TextRenderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        store: Optional[BestScoreStore] = None,
    ):
        self.settings = (settings or GameSettings()).validate()
        pygame.init()
        pygame.display.set_caption(CAPTION)
        size = (self.settings.width, self.settings.height)
        flags = pygame.FULLSCREEN if FULLSCREEN else 0
        try:
            # vsync: 1 to enable, 0 to disable
            self.screen = pygame.display.set_mode(size, flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame builds reject the vsync kwarg, or vsync was
            # requested but unavailable on this driver.
            self.screen = pygame.display.set_mode(size, flags)
        self.clock = pygame.time.Clock()

        self.scheduler = Scheduler()
        self.dialogs = OverlayDialogs()
        self.text = TextRenderer()
        self.scene = Session(
            PygameSurface(*size),
            self.scheduler,
            store or JsonBestScoreStore(),
            self.dialogs,
            self.settings,
        )
        logger.info("engine ready at %dx%d, tick %.1f Hz", size[0], size[1], self.settings.fps)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            # Escape quits unless the scene used it (e.g. leaving a run)
            consumed = self.scene.handle_event(event)
            if not consumed and event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    # ------------------------------------------------------------------
    def update(self, dt_ms: float):
        self.scheduler.advance(dt_ms)
        self.scene.update(dt_ms)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.screen.fill((0, 0, 0))
        self.scene.render(self.screen, self.text)
        self.dialogs.draw(self.screen, self.text)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        self.scene.show_main_menu_dialog()
        running = True
        try:
            while running:
                # Cap the host loop; a long stall is clamped so the scheduler
                # does not replay seconds of ticks in one frame.
                dt_ms = min(self.clock.tick(DISPLAY_FPS), MAX_FRAME_MS)
                running = self.handle_events()
                if not running:
                    break
                self.update(dt_ms)
                self.render()
        finally:
            pygame.quit()

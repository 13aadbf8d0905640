"""Game session: phase state machine, per-tick update and scoring.

All mutable game state (player, obstacles, phase, timers) lives on the
session. Two repeating timers exist while the arena is animated: the arena
tick driving `update_frame()` and the obstacle refresh. Every transition
cancels both before creating replacements, so at most one of each is ever
live on the scheduler.

Phases:
- MENU: obstacles drift in the background, no player, no collisions.
- RUNNING: player steered by arrow keys, collisions end the run.
- ENDED: timers stopped, last frame frozen, summary shown.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import List, Optional

import pygame

from core.scene import Scene
from core.scheduler import Scheduler, TimerHandle
from dodge.arena import Arena
from dodge.entity import Direction, Entity
from dodge.score import format_score
from dodge.settings import GameSettings
from dodge.spawner import Spawner
from render.surface import RenderSurface
from storage.best_score import BestScoreStore
from ui.dialogs import DialogSignals

logger = logging.getLogger(__name__)

_ARROW_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
_CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)

HUD_COLOR = (235, 235, 235)


class Phase(Enum):
    MENU = auto()
    RUNNING = auto()
    ENDED = auto()


class Session(Scene):
    def __init__(
        self,
        surface: RenderSurface,
        scheduler: Scheduler,
        store: BestScoreStore,
        dialogs: DialogSignals,
        settings: Optional[GameSettings] = None,
        spawner: Optional[Spawner] = None,
    ) -> None:
        self.settings = (settings or GameSettings()).validate()
        self.surface = surface
        self.scheduler = scheduler
        self.store = store
        self.dialogs = dialogs
        self.spawner = spawner or Spawner(self.settings)

        self.phase = Phase.MENU
        self.arena: Optional[Arena] = None
        self.player: Optional[Entity] = None
        self.obstacles: List[Entity] = []
        self.start_time: Optional[float] = None
        self.last_score: Optional[int] = None
        self.best_score: Optional[int] = None
        self._refresh: Optional[TimerHandle] = None

    # ------------------------------------------------------------------
    # timers
    def _cancel_timers(self) -> None:
        if self._refresh is not None:
            self._refresh.cancel()
            self._refresh = None
        if self.arena is not None:
            self.arena.stop()

    def _start_timers(self) -> None:
        self._refresh = self.scheduler.set_interval(
            self._refresh_obstacles, self.settings.spawn_period_ms, name="obstacle-refresh"
        )
        self.arena.start()

    def _new_arena(self) -> Arena:
        return Arena(self.surface, self.scheduler, self.update_frame, self.settings.fps)

    def _refresh_obstacles(self) -> None:
        self.obstacles = self.spawner.refresh(
            self.obstacles, self.arena.width, self.arena.height
        )

    # ------------------------------------------------------------------
    # transitions
    def show_main_menu_dialog(self) -> None:
        """Enter MENU: background animation only, start overlay shown."""
        self._cancel_timers()
        if self.arena is not None:
            self.arena.clear()
        self.dialogs.hide_end_overlay()

        self.phase = Phase.MENU
        self.player = None
        self.arena = self._new_arena()
        self.obstacles = self.spawner.spawn_batch([], self.arena.width, self.arena.height)
        self._start_timers()
        self.dialogs.show_start_overlay()
        logger.info("main menu shown")

    def start_game(self) -> None:
        """Enter RUNNING with a fresh arena, player and obstacle batch."""
        self.dialogs.hide_start_overlay()
        self.dialogs.hide_end_overlay()
        self._cancel_timers()
        if self.arena is not None:
            self.arena.clear()

        self.arena = self._new_arena()
        self.player = self._create_player()
        self.obstacles = self.spawner.spawn_batch([], self.arena.width, self.arena.height)
        self.phase = Phase.RUNNING
        self.last_score = None
        self.start_time = self.scheduler.now_ms
        self._start_timers()
        logger.info("game started with %d obstacles", len(self.obstacles))

    def end_game(self) -> None:
        """Enter ENDED: stop timers, score the run and persist a new best."""
        score = int(self.scheduler.now_ms - self.start_time)
        self.phase = Phase.ENDED
        self._cancel_timers()

        if self.best_score is None:
            self.best_score = self.store.get_best_score()
        if self.best_score is None or score > self.best_score:
            self.best_score = score
            self.store.set_best_score(score)
            logger.info("new best score %s", format_score(score))

        self.last_score = score
        logger.info("game over after %s", format_score(score))
        self.dialogs.show_end_overlay(format_score(score), format_score(self.best_score))

    def _create_player(self) -> Entity:
        s = self.settings
        size = s.player_width
        x = (self.arena.width - size) / 2
        y = (self.arena.height - size) / 2
        return Entity.player(x, y, size, s.player_color)

    # ------------------------------------------------------------------
    # per tick
    def update_frame(self) -> None:
        if self.phase is Phase.RUNNING:
            for obstacle in self.obstacles:
                if self.player.overlaps(obstacle):
                    self.end_game()
                    return

        if self.phase is Phase.ENDED:
            return

        running = self.phase is Phase.RUNNING
        self.arena.clear()
        if running:
            self.player.advance()
        for obstacle in self.obstacles:
            obstacle.advance()
        if running:
            self.player.draw(self.surface)
        for obstacle in self.obstacles:
            obstacle.draw(self.surface)

    def steer(self, direction: Direction) -> bool:
        if self.phase is not Phase.RUNNING:
            return False
        self.player.steer(direction, self.settings.player_speed)
        return True

    def elapsed_ms(self) -> int:
        if self.start_time is None:
            return 0
        if self.phase is Phase.ENDED and self.last_score is not None:
            return self.last_score
        return int(self.scheduler.now_ms - self.start_time)

    # ------------------------------------------------------------------
    # scene hooks
    def handle_event(self, event) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        key = event.key
        if self.phase is Phase.MENU:
            if key in _CONFIRM_KEYS:
                self.start_game()
                return True
        elif self.phase is Phase.RUNNING:
            if key in _ARROW_KEYS:
                return self.steer(_ARROW_KEYS[key])
            if key == pygame.K_ESCAPE:
                self.show_main_menu_dialog()
                return True
        elif self.phase is Phase.ENDED:
            if key in _CONFIRM_KEYS:
                self.start_game()
                return True
            if key in (pygame.K_ESCAPE, pygame.K_m):
                self.show_main_menu_dialog()
                return True
        return False

    def render(self, screen, text=None) -> None:  # pragma: no cover - visual
        self.surface.blit_to(screen)
        if self.phase is Phase.RUNNING and text is not None:
            text.draw_text(
                screen,
                format_score(self.elapsed_ms()),
                screen.get_width() - 10,
                10,
                HUD_COLOR,
                key="elapsed",
                align="topright",
            )


__all__ = ["Session", "Phase"]

"""Game settings snapshot built from `config` plus command-line overrides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import config


class ConfigError(ValueError):
    """Raised for settings the simulation cannot run with."""


@dataclass
class GameSettings:
    width: int = config.WIDTH
    height: int = config.HEIGHT
    fps: float = config.FPS
    num_obstacles: int = config.NUM_OBSTACLES
    max_obstacles: Optional[int] = config.MAX_OBSTACLES
    spawn_period_ms: float = config.SPAWN_PERIOD_MS
    min_speed: float = config.MIN_SPEED
    max_speed: float = config.MAX_SPEED
    min_width: float = config.MIN_WIDTH
    max_width: float = config.MAX_WIDTH
    spawn_offset: float = config.SPAWN_OFFSET
    player_speed: float = config.PLAYER_SPEED
    player_width: float = config.PLAYER_WIDTH
    player_color: str = config.PLAYER_COLOR
    seed: Optional[int] = None

    @property
    def tick_ms(self) -> float:
        return 1000.0 / self.fps

    def validate(self) -> "GameSettings":
        """Reject configurations that would stall or break the simulation.

        A non-positive surface or spawn offset leaves the offscreen spawn
        region empty and rejection sampling would never terminate.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"surface must be positive, got {self.width}x{self.height}")
        if self.spawn_offset <= 0:
            raise ConfigError(f"spawn offset must be positive, got {self.spawn_offset}")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")
        if self.spawn_period_ms <= 0:
            raise ConfigError(f"spawn period must be positive, got {self.spawn_period_ms}")
        if self.num_obstacles < 0:
            raise ConfigError(f"obstacle count cannot be negative, got {self.num_obstacles}")
        if self.max_obstacles is not None and self.max_obstacles < self.num_obstacles:
            raise ConfigError(
                f"obstacle cap {self.max_obstacles} is below the batch size {self.num_obstacles}"
            )
        if not 0 < self.min_width <= self.max_width:
            raise ConfigError(f"bad width range [{self.min_width}, {self.max_width}]")
        if not 0 < self.min_speed <= self.max_speed:
            raise ConfigError(f"bad speed range [{self.min_speed}, {self.max_speed}]")
        if self.player_width <= 0 or self.player_speed < 0:
            raise ConfigError("player size must be positive and speed non-negative")
        return self

"""Obstacle spawning outside the visible surface.

Spawn positions come from rejection sampling over a band `spawn_offset` wide
around the surface. Candidates are drawn in vectorized chunks and the first
accepted one is used; there is no retry cap, which is why `GameSettings`
refuses a non-positive surface or offset up front.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from dodge.entity import Entity
from dodge.settings import GameSettings

logger = logging.getLogger(__name__)

# Candidates drawn per sampling round
_CANDIDATE_CHUNK = 16
_GRAY_MIN = 100
_GRAY_MAX = 220


def gray_color(value: int) -> str:
    """Neutral gray '#VVVVVV' with one shared upper-case hex channel."""
    channel = f"{int(value):02X}"
    return "#" + channel * 3


class Spawner:
    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.settings = (settings or GameSettings()).validate()
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.seed)

    # ------------------------------------------------------------------
    def _spawn_position(self, surface_w: float, surface_h: float) -> Tuple[float, float]:
        offset = self.settings.spawn_offset
        # Guard uses the global max width, not the obstacle's own width
        guard = self.settings.max_width
        while True:
            xs = self.rng.uniform(-offset, surface_w + offset, _CANDIDATE_CHUNK)
            ys = self.rng.uniform(-offset, surface_h + offset, _CANDIDATE_CHUNK)
            valid = ((xs < -guard) | (xs > surface_w)) & ((ys < -guard) | (ys > surface_h))
            hits = np.flatnonzero(valid)
            if hits.size:
                i = hits[0]
                return float(xs[i]), float(ys[i])

    def _random_velocity(self) -> Tuple[float, float]:
        s = self.settings
        speeds = self.rng.uniform(s.min_speed, s.max_speed, 2)
        signs = np.where(self.rng.uniform(-1, 1, 2) > 0, 1.0, -1.0)
        vx, vy = speeds * signs
        return float(vx), float(vy)

    def spawn_one(self, surface_w: float, surface_h: float) -> Entity:
        s = self.settings
        color = gray_color(self.rng.integers(_GRAY_MIN, _GRAY_MAX))
        width = float(self.rng.uniform(s.min_width, s.max_width))
        x, y = self._spawn_position(surface_w, surface_h)
        return Entity.obstacle(x, y, width, color, self._random_velocity())

    def spawn_batch(
        self, existing: Optional[List[Entity]], surface_w: float, surface_h: float
    ) -> List[Entity]:
        """Return `existing` followed by a full batch of new obstacles."""
        obstacles = list(existing) if existing is not None else []
        for _ in range(self.settings.num_obstacles):
            obstacles.append(self.spawn_one(surface_w, surface_h))
        return obstacles

    def refresh(
        self, current: List[Entity], surface_w: float, surface_h: float
    ) -> List[Entity]:
        """Keep obstacles fully on the surface, cull the rest, add a new batch."""
        kept = [e for e in current if e.is_within_surface(surface_w, surface_h)]
        culled = len(current) - len(kept)

        cap = self.settings.max_obstacles
        if cap is not None:
            room = cap - self.settings.num_obstacles
            if len(kept) > room:
                # Oldest survivors go first
                kept = kept[len(kept) - room:] if room > 0 else []

        obstacles = self.spawn_batch(kept, surface_w, surface_h)
        logger.debug(
            "refresh: kept %d, culled %d, total %d", len(kept), culled, len(obstacles)
        )
        return obstacles


__all__ = ["Spawner", "gray_color"]

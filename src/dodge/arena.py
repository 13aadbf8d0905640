"""Arena: the visible surface plus the fixed-rate simulation tick."""

from __future__ import annotations

import logging
from typing import Optional

from core.scheduler import Scheduler, TimerCallback, TimerHandle
from render.surface import RenderSurface

logger = logging.getLogger(__name__)


class Arena:
    def __init__(
        self,
        surface: RenderSurface,
        scheduler: Scheduler,
        on_tick: TimerCallback,
        fps: float,
    ) -> None:
        self.surface = surface
        self.scheduler = scheduler
        self.on_tick = on_tick
        self.fps = float(fps)
        self._tick: Optional[TimerHandle] = None

    @property
    def width(self) -> int:
        return self.surface.width

    @property
    def height(self) -> int:
        return self.surface.height

    @property
    def running(self) -> bool:
        return self._tick is not None and self._tick.active

    def start(self) -> None:
        # Never leave a previous tick alive behind the new one
        self.stop()
        self._tick = self.scheduler.set_interval(
            self.on_tick, 1000.0 / self.fps, name="arena-tick"
        )

    def stop(self) -> None:
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None

    def clear(self) -> None:
        self.surface.clear_region(0, 0, self.width, self.height)


__all__ = ["Arena"]

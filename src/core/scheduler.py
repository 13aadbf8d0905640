"""Fixed-rate timer scheduler driven by an explicit millisecond clock.

The engine feeds wall-clock time into `advance()`; tests feed exact amounts.
Every repeating callback in the game (simulation tick, obstacle refresh) is
registered here, so the number of live timers is always observable through
`active_count()`.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, List

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], None]


@dataclass
class TimerHandle:
    callback: TimerCallback
    period_ms: float
    next_due: float
    seq: int
    name: str = ""
    active: bool = field(default=True)

    def cancel(self) -> None:
        """Stop the timer. Safe to call on an already cancelled handle."""
        if self.active:
            self.active = False
            logger.debug("timer %s cancelled", self.name or self.seq)


class Scheduler:
    def __init__(self, start_ms: float = 0.0) -> None:
        self.now_ms = float(start_ms)
        self._timers: List[TimerHandle] = []
        self._seq = itertools.count()

    def set_interval(
        self, callback: TimerCallback, period_ms: float, *, name: str = ""
    ) -> TimerHandle:
        """Fire `callback` every `period_ms`, first one period from now."""
        period_ms = float(period_ms)
        if period_ms <= 0:
            raise ValueError(f"timer period must be positive, got {period_ms}")
        handle = TimerHandle(
            callback=callback,
            period_ms=period_ms,
            next_due=self.now_ms + period_ms,
            seq=next(self._seq),
            name=name,
        )
        self._timers.append(handle)
        logger.debug("timer %s every %.2fms", name or handle.seq, period_ms)
        return handle

    def active_count(self) -> int:
        return sum(1 for t in self._timers if t.active)

    # ------------------------------------------------------------------
    def advance(self, elapsed_ms: float) -> None:
        """Move the clock forward, firing every timer that falls due.

        Callbacks run in due order (creation order on ties) and observe
        `now_ms` equal to their own due time. A handle cancelled by an earlier
        callback in the same step does not fire.
        """
        if elapsed_ms < 0:
            raise ValueError("cannot advance the clock backwards")
        target = self.now_ms + elapsed_ms
        while True:
            due = [t for t in self._timers if t.active and t.next_due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.next_due, t.seq))
            self.now_ms = timer.next_due
            timer.next_due += timer.period_ms
            timer.callback()
        self.now_ms = target
        self._timers = [t for t in self._timers if t.active]


__all__ = ["Scheduler", "TimerHandle", "TimerCallback"]

from .scheduler import Scheduler, TimerHandle

__all__ = [
    "Scheduler",
    "TimerHandle",
]

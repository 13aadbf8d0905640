import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from core.scheduler import Scheduler  # noqa: E402
from dodge.settings import GameSettings  # noqa: E402
from dodge.spawner import Spawner  # noqa: E402
from dodge.session import Session  # noqa: E402
from storage.best_score import MemoryBestScoreStore  # noqa: E402


class RecordingSurface:
    def __init__(self, width=200, height=100):
        self.width = width
        self.height = height
        self.calls = []

    def clear_region(self, x, y, w, h):
        self.calls.append(("clear", x, y, w, h))

    def draw_filled_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def count(self, kind):
        return sum(1 for c in self.calls if c[0] == kind)


class RecordingDialogs:
    def __init__(self):
        self.events = []

    def show_start_overlay(self):
        self.events.append(("show_start",))

    def hide_start_overlay(self):
        self.events.append(("hide_start",))

    def show_end_overlay(self, score, best_score):
        self.events.append(("show_end", score, best_score))

    def hide_end_overlay(self):
        self.events.append(("hide_end",))

    @property
    def last(self):
        return self.events[-1] if self.events else None


@pytest.fixture
def settings():
    return GameSettings(width=200, height=100, num_obstacles=5, seed=1234)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def spawner(settings, rng):
    return Spawner(settings, rng)


@pytest.fixture
def surface(settings):
    return RecordingSurface(settings.width, settings.height)


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def store():
    return MemoryBestScoreStore()


@pytest.fixture
def dialogs():
    return RecordingDialogs()


@pytest.fixture
def session(surface, scheduler, store, dialogs, settings, spawner):
    return Session(surface, scheduler, store, dialogs, settings, spawner)

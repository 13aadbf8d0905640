"""Best-score persistence.

The game only needs `get_best_score()` / `set_best_score()`; a missing record
is reported as None. `JsonBestScoreStore` keeps the value under a single key
in a small JSON file, so other keys written by hand survive updates.

An unreadable or malformed file is logged once per read and treated as "no
record yet"; failures while writing are left to propagate.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional, Protocol

from config import BEST_SCORE_KEY, BEST_SCORE_PATH

logger = logging.getLogger(__name__)


class BestScoreStore(Protocol):
    def get_best_score(self) -> Optional[int]: ...

    def set_best_score(self, score: int) -> None: ...


class MemoryBestScoreStore:
    def __init__(self, initial: Optional[int] = None) -> None:
        self.value = initial
        self.writes = 0

    def get_best_score(self) -> Optional[int]:
        return self.value

    def set_best_score(self, score: int) -> None:
        self.value = int(score)
        self.writes += 1


class JsonBestScoreStore:
    def __init__(self, path: str = BEST_SCORE_PATH, key: str = BEST_SCORE_KEY) -> None:
        self.path = path
        self.key = key

    def _load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.warning("ignoring unreadable score file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("ignoring score file %s: not a JSON object", self.path)
            return {}
        return data

    def get_best_score(self) -> Optional[int]:
        value = self._load().get(self.key)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("ignoring non-integer best score %r in %s", value, self.path)
            return None

    def set_best_score(self, score: int) -> None:
        data = self._load()
        data[self.key] = int(score)
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
        os.replace(tmp_path, self.path)


__all__ = ["BestScoreStore", "JsonBestScoreStore", "MemoryBestScoreStore"]

"""Dodge package: re-export the game types for simpler imports.

Callers can import public types from `dodge` directly, e.g.:

    from dodge import Session, Spawner, Entity

Implementation files remain under `dodge/*.py`.
"""

from .entity import Entity, Role, Direction
from .settings import GameSettings, ConfigError
from .spawner import Spawner
from .arena import Arena
from .session import Session, Phase
from .score import format_score

__all__ = [
    "Entity",
    "Role",
    "Direction",
    "GameSettings",
    "ConfigError",
    "Spawner",
    "Arena",
    "Session",
    "Phase",
    "format_score",
]

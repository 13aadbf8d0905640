"""Moving rectangles: the player and the obstacles.

Positions are the top-left corner of the box in surface units. Nothing here
clamps to the surface; entities drift off and back on freely.
"""

from __future__ import annotations

from enum import Enum, auto

from pygame.math import Vector2


class Role(Enum):
    PLAYER = auto()
    OBSTACLE = auto()


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Entity:
    def __init__(
        self,
        width: float,
        height: float,
        color: str,
        position: Vector2,
        velocity: Vector2,
        role: Role,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.color = color
        self.position = Vector2(position)
        self.velocity = Vector2(velocity)
        self.role = role

    @classmethod
    def player(cls, x: float, y: float, size: float, color: str) -> "Entity":
        return cls(size, size, color, Vector2(x, y), Vector2(0, 0), Role.PLAYER)

    @classmethod
    def obstacle(
        cls, x: float, y: float, size: float, color: str, velocity
    ) -> "Entity":
        return cls(size, size, color, Vector2(x, y), Vector2(velocity), Role.OBSTACLE)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def is_player(self) -> bool:
        return self.role is Role.PLAYER

    def advance(self) -> None:
        self.position += self.velocity

    def steer(self, direction: Direction, speed: float) -> None:
        """Axis-aligned movement: one axis at +/- speed, the other at rest."""
        if not self.is_player:
            raise ValueError("obstacle velocity is fixed at creation")
        dx, dy = direction.value
        self.velocity = Vector2(dx * speed, dy * speed)

    def overlaps(self, other: "Entity") -> bool:
        # Strict inequalities: boxes that only share an edge do not collide
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def is_within_surface(self, surface_w: float, surface_h: float) -> bool:
        return (
            self.x >= 0
            and self.y >= 0
            and self.x + self.width <= surface_w
            and self.y + self.height <= surface_h
        )

    def draw(self, surface) -> None:
        surface.draw_filled_rect(self.x, self.y, self.width, self.height, self.color)

    def __repr__(self) -> str:
        return (
            f"Entity({self.role.name}, pos=({self.x:.1f}, {self.y:.1f}), "
            f"size=({self.width:.1f}, {self.height:.1f}), "
            f"vel=({self.velocity.x:.2f}, {self.velocity.y:.2f}))"
        )


__all__ = ["Entity", "Role", "Direction"]

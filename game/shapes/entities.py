"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum


class ShapeKind(str, Enum):
    """Shapes the player can pick on the selection screen"""
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    DIAMOND = "diamond"
    HEXAGON = "hexagon"
    STAR = "star"
    CROSS = "cross"
    HEART = "heart"

    @classmethod
    def parse(cls, name: str) -> "ShapeKind":
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown shape {name!r} (expected one of: {valid})") from None


@dataclass
class Player:
    """Player ship, drawn as the chosen shape"""
    x: float
    y: float
    radius: float = 30.0
    shape: ShapeKind = ShapeKind.CIRCLE
    speed: float = 8.0  # px/frame


@dataclass
class Bullet:
    """Bullet projectile travelling straight up"""
    x: float
    y: float
    radius: float = 5.0
    speed: float = 10.0  # px/frame
    alive: bool = True


@dataclass
class Enemy:
    """Descending enemy square, anchored at its top-left corner"""
    x: float
    y: float
    size: float = 40.0
    alive: bool = True

    @property
    def center(self):
        half = self.size / 2
        return self.x + half, self.y + half

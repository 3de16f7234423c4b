"""Basic geometric value types and screen settings shared across the game."""

from dataclasses import dataclass
from enum import Enum

SCREEN_WIDTH = 320
SCREEN_HEIGHT = 256
FPS = 10
SCALE = 2


@dataclass
class Vector2:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Size:
    """Width and height of a rectangular object."""

    width: float = 0.0
    height: float = 0.0


class CollisionSide(str, Enum):
    """The side of an object on which another object touches it."""

    NONE = "NONE"
    RIGHT = "RIGHT"
    LEFT = "LEFT"
    TOP = "TOP"
    BOTTOM = "BOTTOM"
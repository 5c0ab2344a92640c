"""Game entities."""

from .paddle import Paddle, clamp
from .ball import Ball
from .field import Field, Score

__all__ = [
    "Paddle",
    "Ball",
    "Field",
    "Score",
    "clamp",
]

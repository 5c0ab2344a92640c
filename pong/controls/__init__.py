"""Player input."""

from .input import Direction, InputBuffer, NO_INPUT, PaddleControl

__all__ = [
    "Direction",
    "InputBuffer",
    "NO_INPUT",
    "PaddleControl",
]

"""Player input buffering."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Direction(Enum):
    """Key-style paddle direction; the value is the sign of dy."""
    UP = -1
    NONE = 0
    DOWN = 1


@dataclass(frozen=True)
class PaddleControl:
    """
    Player paddle signal for a single tick.

    A pointer target (absolute y of the paddle center) overrides the
    direction when present.
    """

    target_y: Optional[float] = None
    direction: Direction = Direction.NONE

    @classmethod
    def pointer(cls, y: float) -> "PaddleControl":
        return cls(target_y=y)

    @classmethod
    def keys(cls, direction: Direction) -> "PaddleControl":
        return cls(direction=direction)

    @property
    def is_pointer(self) -> bool:
        return self.target_y is not None


NO_INPUT = PaddleControl()


class InputBuffer:
    """
    Collects raw input between ticks and hands out one PaddleControl per poll.

    Pointer samples are kept until the next poll, so input arriving while
    the simulation is holding is not lost; the last sample wins. Held keys
    persist until released.
    """

    def __init__(self) -> None:
        self._pointer_y: Optional[float] = None
        self._up_held = False
        self._down_held = False

    def pointer_moved(self, y: float) -> None:
        """Record a pointer sample (field-relative y)."""
        self._pointer_y = y

    def key_changed(self, direction: Direction, held: bool) -> None:
        """Record an Up/Down key press or release."""
        if direction is Direction.UP:
            self._up_held = held
        elif direction is Direction.DOWN:
            self._down_held = held

    def release_all(self) -> None:
        """Forget held keys (e.g. when the window loses focus)."""
        self._up_held = False
        self._down_held = False

    @property
    def direction(self) -> Direction:
        """Current key direction; Up wins when both are held."""
        if self._up_held:
            return Direction.UP
        if self._down_held:
            return Direction.DOWN
        return Direction.NONE

    @property
    def has_pointer_sample(self) -> bool:
        return self._pointer_y is not None

    def poll(self) -> PaddleControl:
        """Consume buffered input for one tick."""
        if self._pointer_y is not None:
            control = PaddleControl.pointer(self._pointer_y)
            self._pointer_y = None
            return control
        return PaddleControl.keys(self.direction)

"""Ball entity."""

from dataclasses import dataclass
import math


@dataclass
class Ball:
    """
    The ball, positioned by its center.

    `speed` is the nominal scalar speed: set to the base value on every
    serve and raised on every paddle bounce.
    """

    x: float
    y: float
    radius: float
    speed: float
    vx: float = 0.0
    vy: float = 0.0

    @property
    def velocity_magnitude(self) -> float:
        """Length of the velocity vector."""
        return math.hypot(self.vx, self.vy)

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

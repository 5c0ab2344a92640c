"""Paddle entity."""

from dataclasses import dataclass


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


@dataclass
class Paddle:
    """
    A vertical paddle.

    Position is the top-left corner; x never changes after creation.
    """

    x: float
    y: float
    width: float
    height: float
    speed: float  # Max vertical speed
    dy: float = 0.0

    @property
    def center_y(self) -> float:
        """Vertical center of the paddle."""
        return self.y + self.height / 2

    @property
    def right(self) -> float:
        """Right edge x-coordinate."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge y-coordinate."""
        return self.y + self.height

    def max_y(self, field_height: float) -> float:
        """Largest legal top coordinate inside the field."""
        return max(0.0, field_height - self.height)

    def clamp_to(self, field_height: float) -> None:
        """Keep the paddle fully inside the field."""
        self.y = clamp(self.y, 0.0, self.max_y(field_height))

"""Playing field and score records."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Field:
    """Fixed-size rectangular playing area."""

    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        """Center point of the field."""
        return (self.width / 2, self.height / 2)


@dataclass
class Score:
    """Session score. Counters only ever go up."""

    player: int = 0
    cpu: int = 0

    def award_player(self) -> None:
        self.player += 1

    def award_cpu(self) -> None:
        self.cpu += 1

    def as_tuple(self) -> Tuple[int, int]:
        return (self.player, self.cpu)

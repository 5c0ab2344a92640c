"""Frame timing: monotonic timestamps to normalized elapsed values."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class GameClock:
    """
    Converts frame timestamps into elapsed time in nominal-frame units.

    One nominal frame (~16.67 ms, i.e. 60 Hz) maps to an elapsed value of
    1.0. The very first frame yields 0 so the game does not jump on start.
    """

    nominal_frame_ms: float = 16.6667
    max_elapsed: float = 10.0  # Cap per frame, e.g. after the window stalls

    # Internal state
    _frame: int = field(default=0, init=False)
    _last_ms: Optional[float] = field(default=None, init=False)
    _frame_times: List[float] = field(default_factory=list, init=False)

    @property
    def frame(self) -> int:
        """Frames seen since the last reset."""
        return self._frame

    @property
    def last_timestamp(self) -> Optional[float]:
        """Timestamp (ms) of the most recent frame."""
        return self._last_ms

    @property
    def fps(self) -> float:
        """Measured frames per second over the last second."""
        if len(self._frame_times) < 2:
            return 0.0
        duration = self._frame_times[-1] - self._frame_times[0]
        if duration <= 0:
            return 0.0
        return (len(self._frame_times) - 1) * 1000.0 / duration

    def advance(self, now_ms: float) -> float:
        """
        Register a frame and return its elapsed value.

        Args:
            now_ms: Monotonic timestamp in milliseconds

        Returns:
            Elapsed nominal frames since the previous call, in [0, max_elapsed]
        """
        if self._last_ms is None:
            self._last_ms = now_ms
            elapsed = 0.0
        else:
            elapsed = (now_ms - self._last_ms) / self.nominal_frame_ms
            # Timestamps going backwards count as a zero-motion frame
            self._last_ms = max(self._last_ms, now_ms)

        self._frame += 1

        self._frame_times.append(now_ms)
        cutoff = now_ms - 1000.0
        self._frame_times = [t for t in self._frame_times if t > cutoff]

        return max(0.0, min(elapsed, self.max_elapsed))

    def reset(self) -> None:
        """Reset clock to initial state."""
        self._frame = 0
        self._last_ms = None
        self._frame_times.clear()

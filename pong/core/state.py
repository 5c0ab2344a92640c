"""Game state container."""

from dataclasses import dataclass, field, replace
from typing import List, Optional
import numpy as np

from config.settings import Settings
from pong.entities import Ball, Field, Paddle, Score


@dataclass
class MatchStats:
    """Rally statistics collected from simulation events."""

    rally_hits: int = 0  # Paddle hits in the current rally
    total_hits: int = 0
    wall_bounces: int = 0
    longest_rally: int = 0
    peak_speed: float = 0.0
    rally_lengths: List[int] = field(default_factory=list)
    rally_history_limit: int = 500

    def record_paddle_hit(self, speed: float) -> None:
        """Record a paddle bounce at the given outgoing speed."""
        self.rally_hits += 1
        self.total_hits += 1
        self.longest_rally = max(self.longest_rally, self.rally_hits)
        self.peak_speed = max(self.peak_speed, speed)

    def record_wall_bounce(self) -> None:
        """Record a wall bounce."""
        self.wall_bounces += 1

    def end_rally(self) -> None:
        """Close the current rally after a point is scored."""
        self.rally_lengths.append(self.rally_hits)
        if len(self.rally_lengths) > self.rally_history_limit:
            self.rally_lengths = self.rally_lengths[-self.rally_history_limit:]
        self.rally_hits = 0

    def average_rally(self) -> float:
        """Mean paddle hits per finished rally."""
        if not self.rally_lengths:
            return 0.0
        return float(np.mean(self.rally_lengths))

    def reset(self) -> None:
        """Clear all statistics."""
        self.rally_hits = 0
        self.total_hits = 0
        self.wall_bounces = 0
        self.longest_rally = 0
        self.peak_speed = 0.0
        self.rally_lengths.clear()


@dataclass
class GameState:
    """
    Central state record for one game session.

    Passed into and returned from the simulation step; renderers only read it.
    """

    field: Field
    player: Paddle
    cpu: Paddle
    ball: Ball
    score: Score = field(default_factory=Score)
    tick: int = 0

    # Monotonic timestamp (ms) until which the simulation holds after a score
    pause_until: Optional[float] = None
    # Manual pause (click to resume)
    paused: bool = False

    @classmethod
    def create(cls, settings: Settings, width: float | None = None,
               height: float | None = None) -> "GameState":
        """
        Build the start-of-session state.

        Paddles are vertically centered and the ball sits at the field center
        with zero velocity until the first serve.
        """
        width = width if width is not None else settings.display.window_width
        height = height if height is not None else settings.display.window_height
        court = settings.court

        play_field = Field(float(width), float(height))
        paddle_y = (height - court.paddle_height) / 2

        player = Paddle(
            x=float(court.padding),
            y=paddle_y,
            width=float(court.paddle_width),
            height=float(court.paddle_height),
            speed=court.player_speed,
        )
        cpu = Paddle(
            x=float(width - court.padding - court.paddle_width),
            y=paddle_y,
            width=float(court.paddle_width),
            height=float(court.paddle_height),
            speed=court.cpu_speed,
        )
        cx, cy = play_field.center
        ball = Ball(x=cx, y=cy, radius=court.ball_radius, speed=court.ball_base_speed)

        return cls(field=play_field, player=player, cpu=cpu, ball=ball)

    def copy(self) -> "GameState":
        """Copy with independent entity records."""
        return replace(
            self,
            player=replace(self.player),
            cpu=replace(self.cpu),
            ball=replace(self.ball),
            score=replace(self.score),
        )

    def is_holding(self, now_ms: float) -> bool:
        """Whether the post-score hold is still active at `now_ms`."""
        return self.pause_until is not None and now_ms < self.pause_until

"""Reactive CPU paddle heuristic."""

from dataclasses import dataclass

from pong.entities import Ball, Field, Paddle, clamp


@dataclass
class TrackingOpponent:
    """
    Follows the ball while it approaches, drifts back to center otherwise.

    The CPU paddle sits on the right, so a positive ball vx means the ball
    is coming toward it. Movement per tick is capped at
    `paddle.speed * elapsed * scale`, where `scale` must match the ball's
    position-integration scale.
    """

    def target_y(self, paddle: Paddle, ball: Ball, play_field: Field) -> float:
        """Desired top coordinate for the paddle."""
        if ball.vx > 0:
            return ball.y - paddle.height / 2
        return play_field.height / 2 - paddle.height / 2

    def max_step(self, paddle: Paddle, elapsed: float, scale: float) -> float:
        """Largest move allowed this tick."""
        return paddle.speed * max(0.0, elapsed) * scale

    def next_y(
        self,
        paddle: Paddle,
        ball: Ball,
        play_field: Field,
        elapsed: float,
        scale: float,
    ) -> float:
        """Paddle top coordinate after one tick, clamped to the field."""
        limit = self.max_step(paddle, elapsed, scale)
        delta = self.target_y(paddle, ball, play_field) - paddle.y
        y = paddle.y + clamp(delta, -limit, limit)
        return clamp(y, 0.0, paddle.max_y(play_field.height))

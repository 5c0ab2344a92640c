"""
Per-frame simulation step.

Kinematics, wall and paddle collisions, scoring and serving. Everything here
is a function of its arguments: the incoming state is copied, never mutated,
and randomness comes only from the injected RNG when a ball is served.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import math
import random

from config.settings import Settings
from pong.ai.tracking import TrackingOpponent
from pong.controls.input import PaddleControl
from pong.entities import Ball, Field, Paddle
from .event_bus import EventType
from .state import GameState


class ServeDirection(Enum):
    """Horizontal direction of a serve."""
    LEFT = -1   # Toward the player
    RIGHT = 1   # Toward the CPU


# The side that just scored receives the next serve
SERVE_AFTER_SCORE = {
    EventType.SCORE_CPU: ServeDirection.RIGHT,
    EventType.SCORE_PLAYER: ServeDirection.LEFT,
}


@dataclass(frozen=True)
class Rules:
    """Fixed physics and scoring parameters for a session."""

    position_scale: float = 10.0
    speed_increment: float = 0.2
    max_bounce_angle: float = 5 * math.pi / 12  # 75 degrees
    serve_angle: float = math.pi / 6  # 30 degrees
    score_margin: float = 50.0
    unstick_margin: float = 0.5
    base_ball_speed: float = 6.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "Rules":
        """Build rules from loaded settings."""
        rules = settings.rules
        return cls(
            position_scale=rules.position_scale,
            speed_increment=rules.speed_increment,
            max_bounce_angle=math.radians(rules.max_bounce_angle_deg),
            serve_angle=math.radians(rules.serve_angle_deg),
            score_margin=rules.score_margin,
            unstick_margin=rules.unstick_margin,
            base_ball_speed=settings.court.ball_base_speed,
        )


@dataclass
class StepResult:
    """Next state plus the events emitted while producing it."""

    state: GameState
    events: List[EventType] = field(default_factory=list)


def serve_ball(
    ball: Ball,
    play_field: Field,
    rules: Rules,
    rng: random.Random,
    direction: Optional[ServeDirection] = None,
) -> None:
    """
    Re-center the ball and give it a fresh velocity.

    The angle is uniform within +/- serve_angle of horizontal. With no
    direction the side is a coin flip.
    """
    ball.x, ball.y = play_field.center
    ball.speed = rules.base_ball_speed

    angle = rng.random() * 2 * rules.serve_angle - rules.serve_angle
    if direction is None:
        sign = -1 if rng.random() < 0.5 else 1
    else:
        sign = direction.value

    ball.vx = sign * ball.speed * math.cos(angle)
    ball.vy = ball.speed * math.sin(angle)


def move_player(paddle: Paddle, control: PaddleControl, elapsed: float,
                field_height: float) -> None:
    """Apply the player's control signal for one tick."""
    if control.target_y is not None:
        paddle.dy = 0.0
        paddle.y = control.target_y - paddle.height / 2
    else:
        paddle.dy = control.direction.value * paddle.speed
        paddle.y += paddle.dy * elapsed
    paddle.clamp_to(field_height)


def bounce_off_walls(ball: Ball, field_height: float) -> bool:
    """Reflect the ball off the top or bottom edge. Returns True on contact."""
    if ball.top <= 0:
        ball.y = ball.radius
        ball.vy = abs(ball.vy)
        return True
    if ball.bottom >= field_height:
        ball.y = field_height - ball.radius
        ball.vy = -abs(ball.vy)
        return True
    return False


def _overlaps_vertically(ball: Ball, paddle: Paddle) -> bool:
    return ball.bottom >= paddle.y and ball.top <= paddle.bottom


def hits_player_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Leading (left) edge inside the paddle's x-span, vertical overlap."""
    return paddle.x <= ball.left <= paddle.right and _overlaps_vertically(ball, paddle)


def hits_cpu_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Leading (right) edge inside the paddle's x-span, vertical overlap."""
    return paddle.x <= ball.right <= paddle.right and _overlaps_vertically(ball, paddle)


def bounce_off_paddle(ball: Ball, paddle: Paddle, rules: Rules, away: int) -> None:
    """
    Reflect the ball off a paddle.

    Where the ball meets the paddle sets the outgoing angle: the center
    sends it straight back, the tips send it out at max_bounce_angle.
    Every bounce adds speed_increment to the scalar speed.

    Args:
        ball: Ball to deflect
        paddle: Paddle that was hit
        rules: Session rules
        away: +1 to send the ball right (player paddle), -1 to send it left
    """
    relative_y = (ball.y - paddle.center_y) / (paddle.height / 2)
    bounce_angle = relative_y * rules.max_bounce_angle
    speed = ball.velocity_magnitude + rules.speed_increment

    ball.speed = speed
    ball.vx = away * abs(speed * math.cos(bounce_angle))
    ball.vy = speed * math.sin(bounce_angle)

    # Push the ball clear of the paddle so it cannot re-trigger
    if away > 0:
        ball.x = paddle.right + ball.radius + rules.unstick_margin
    else:
        ball.x = paddle.x - ball.radius - rules.unstick_margin


def step(
    state: GameState,
    elapsed: float,
    control: PaddleControl,
    rules: Rules,
    rng: random.Random,
    opponent: Optional[TrackingOpponent] = None,
) -> StepResult:
    """
    Advance the game by one tick.

    Args:
        state: Current state (left untouched)
        elapsed: Time since the last tick in nominal frames (1.0 = one frame);
            negative values are treated as 0
        control: Player paddle input for this tick
        rules: Session rules
        rng: Random source, used only when a point re-serves the ball
        opponent: CPU heuristic, defaults to TrackingOpponent

    Returns:
        StepResult with the new state and emitted events in order
    """
    elapsed = max(0.0, elapsed)
    opponent = opponent or TrackingOpponent()

    nxt = state.copy()
    nxt.tick += 1
    events: List[EventType] = []

    play_field = nxt.field
    ball = nxt.ball

    move_player(nxt.player, control, elapsed, play_field.height)

    nxt.cpu.y = opponent.next_y(nxt.cpu, ball, play_field, elapsed, rules.position_scale)

    ball.x += ball.vx * elapsed * rules.position_scale
    ball.y += ball.vy * elapsed * rules.position_scale

    if bounce_off_walls(ball, play_field.height):
        events.append(EventType.WALL_BOUNCE)

    if hits_player_paddle(ball, nxt.player):
        bounce_off_paddle(ball, nxt.player, rules, away=1)
        events.append(EventType.PADDLE_BOUNCE)

    if hits_cpu_paddle(ball, nxt.cpu):
        bounce_off_paddle(ball, nxt.cpu, rules, away=-1)
        events.append(EventType.PADDLE_BOUNCE)

    # Ball must be fully past the margin, not just touching the edge
    scored: Optional[EventType] = None
    if ball.x < -rules.score_margin:
        nxt.score.award_cpu()
        scored = EventType.SCORE_CPU
    elif ball.x > play_field.width + rules.score_margin:
        nxt.score.award_player()
        scored = EventType.SCORE_PLAYER

    if scored is not None:
        events.append(scored)
        serve_ball(ball, play_field, rules, rng, SERVE_AFTER_SCORE[scored])

    return StepResult(state=nxt, events=events)

"""Entity layer: paddles and ball."""

import pygame

from config.colors import Colors
from config.constants import PADDLE_CORNER_RADIUS
from pong.core.state import GameState
from pong.entities import Paddle
from .base import BaseLayer


class EntityLayer(BaseLayer):
    """Draws both paddles and the ball."""

    @property
    def name(self) -> str:
        return "entities"

    def render(self, surface: pygame.Surface, state: GameState) -> None:
        """Render paddles, then the ball on top."""
        self._render_paddle(surface, state.player)
        self._render_paddle(surface, state.cpu)

        ball = state.ball
        pygame.draw.circle(
            surface,
            Colors.BALL,
            (int(round(ball.x)), int(round(ball.y))),
            int(round(ball.radius)),
        )

    def _render_paddle(self, surface: pygame.Surface, paddle: Paddle) -> None:
        rect = pygame.Rect(
            int(round(paddle.x)),
            int(round(paddle.y)),
            int(paddle.width),
            int(paddle.height),
        )
        pygame.draw.rect(surface, Colors.PADDLE, rect, border_radius=PADDLE_CORNER_RADIUS)

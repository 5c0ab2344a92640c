"""HUD layer: scoreboard, rally counter, match stats and pause banner."""

from typing import Optional
import pygame

from config.colors import Colors
from config.settings import Settings
from pong.core.state import GameState, MatchStats
from .base import BaseLayer


class HudLayer(BaseLayer):
    """
    Score and status text.

    Scores sit at 25% and 75% of the field width, 30px from the top.
    """

    def __init__(self, settings: Settings, stats: Optional[MatchStats] = None) -> None:
        super().__init__(settings)
        self.stats = stats

        pygame.font.init()
        self.font_score = pygame.font.Font(None, 28)
        self.font_small = pygame.font.Font(None, 20)
        self.font_banner = pygame.font.Font(None, 40)

    @property
    def name(self) -> str:
        return "hud"

    def render(self, surface: pygame.Surface, state: GameState) -> None:
        """Render scores, rally info, match stats and pause banner."""
        width, height = state.field.width, state.field.height

        self._blit_centered(
            surface, self.font_score, f"Player: {state.score.player}",
            Colors.SCORE_TEXT, (width * 0.25, 30),
        )
        self._blit_centered(
            surface, self.font_score, f"CPU: {state.score.cpu}",
            Colors.SCORE_TEXT, (width * 0.75, 30),
        )

        if self.stats and self.stats.rally_hits > 0:
            self._blit_centered(
                surface, self.font_small, f"Rally {self.stats.rally_hits}",
                Colors.SCORE_TEXT, (width / 2, 30),
            )

        if self.stats and (self.stats.total_hits or self.stats.rally_lengths):
            self._blit_centered(
                surface, self.font_small, self._stats_line(self.stats),
                Colors.SCORE_TEXT, (width / 2, 54),
            )

        if state.paused:
            self._blit_centered(
                surface, self.font_banner, "PAUSED - click to resume",
                Colors.BANNER_TEXT, (width / 2, height / 2 - 40),
            )

    @staticmethod
    def _stats_line(stats: MatchStats) -> str:
        return (
            f"Hits {stats.total_hits}   Best rally {stats.longest_rally}   "
            f"Top speed {stats.peak_speed:.1f}   Avg rally {stats.average_rally():.1f}"
        )

    def _blit_centered(self, surface, font, text, color, center) -> None:
        text_surface = font.render(text, True, color)
        rect = text_surface.get_rect(center=(int(center[0]), int(center[1])))
        surface.blit(text_surface, rect)

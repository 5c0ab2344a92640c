"""Court layer: center net and help line."""

import pygame

from config.colors import Colors
from config.constants import HELP_TEXT, NET_DASH, NET_GAP, NET_MARGIN, NET_WIDTH
from config.settings import Settings
from pong.core.state import GameState
from .base import BaseLayer


class CourtLayer(BaseLayer):
    """Static court markings."""

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        pygame.font.init()
        self.font_help = pygame.font.Font(None, 18)
        self.net_color = Colors.blend(Colors.NET, Colors.BACKGROUND)
        self.help_color = Colors.blend(Colors.HELP_TEXT, Colors.BACKGROUND)

    @property
    def name(self) -> str:
        return "court"

    def render(self, surface: pygame.Surface, state: GameState) -> None:
        """Draw the dashed net and the controls hint."""
        width, height = state.field.width, state.field.height
        center_x = int(width / 2 - NET_WIDTH / 2)

        y = NET_MARGIN
        while y < height - NET_MARGIN:
            pygame.draw.rect(surface, self.net_color, (center_x, y, NET_WIDTH, NET_DASH))
            y += NET_DASH + NET_GAP

        help_surface = self.font_help.render(HELP_TEXT, True, self.help_color)
        help_rect = help_surface.get_rect(center=(int(width / 2), int(height - 14)))
        surface.blit(help_surface, help_rect)

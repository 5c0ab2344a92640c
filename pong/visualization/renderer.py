"""Main render coordinator for the game."""

from typing import Dict, List, Optional
import pygame

from config.colors import Colors
from config.settings import Settings
from pong.core.state import GameState, MatchStats

from .layers.base import BaseLayer
from .layers.court_layer import CourtLayer
from .layers.entity_layer import EntityLayer
from .layers.hud_layer import HudLayer


class Renderer:
    """
    Main render coordinator.

    Manages the render layers and draws a read-only snapshot of the game
    state once per frame.
    """

    def __init__(self, screen: pygame.Surface, settings: Settings) -> None:
        self.screen = screen
        self.settings = settings

        # Layers (in draw order)
        self._layers: List[BaseLayer] = []
        self._layer_visibility: Dict[str, bool] = {}

    def initialize(self, stats: Optional[MatchStats] = None) -> None:
        """Create layers in draw order."""
        self._layers.clear()

        self._layers.append(CourtLayer(self.settings))
        self._layers.append(EntityLayer(self.settings))
        self._layers.append(HudLayer(self.settings, stats))

        for layer in self._layers:
            self._layer_visibility[layer.name] = True

    def render(self, state: GameState) -> None:
        """Render the complete frame."""
        self.screen.fill(Colors.BACKGROUND)

        for layer in self._layers:
            if self._layer_visibility.get(layer.name, True):
                layer.render(self.screen, state)

    def toggle_layer(self, layer_name: str) -> bool:
        """Toggle layer visibility. Returns new state."""
        current = self._layer_visibility.get(layer_name, True)
        self._layer_visibility[layer_name] = not current
        return self._layer_visibility[layer_name]

    def get_layer_visibility(self) -> Dict[str, bool]:
        """Get all layer visibility states."""
        return dict(self._layer_visibility)

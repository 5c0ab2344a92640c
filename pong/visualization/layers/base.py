"""Base class for visualization layers."""

from abc import ABC, abstractmethod
import pygame

from config.settings import Settings
from pong.core.state import GameState


class BaseLayer(ABC):
    """
    Abstract base class for visualization layers.

    Each layer draws one aspect of the game and only reads the state.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    @abstractmethod
    def name(self) -> str:
        """Layer name for identification."""
        pass

    @abstractmethod
    def render(self, surface: pygame.Surface, state: GameState) -> None:
        """
        Render the layer to the surface.

        Args:
            surface: Surface to render to
            state: Current game state
        """
        pass

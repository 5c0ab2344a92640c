"""Configuration module for the Pong game."""

from .settings import Settings
from .colors import Colors

__all__ = ["Settings", "Colors"]

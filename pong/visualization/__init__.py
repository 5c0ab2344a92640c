"""Pygame rendering."""

from .renderer import Renderer

__all__ = ["Renderer"]

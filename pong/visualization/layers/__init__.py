"""Visualization layers."""

from .base import BaseLayer
from .court_layer import CourtLayer
from .entity_layer import EntityLayer
from .hud_layer import HudLayer

__all__ = [
    "BaseLayer",
    "CourtLayer",
    "EntityLayer",
    "HudLayer",
]

"""CPU opponents."""

from .tracking import TrackingOpponent

__all__ = ["TrackingOpponent"]

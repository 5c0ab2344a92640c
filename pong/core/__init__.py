"""Core simulation components."""

from .event_bus import EventBus, EventType, Event
from .state import GameState, MatchStats
from .clock import GameClock
from .physics import Rules, ServeDirection, StepResult, serve_ball, step
from .simulation import Simulation

__all__ = [
    "EventBus",
    "EventType",
    "Event",
    "GameState",
    "MatchStats",
    "GameClock",
    "Rules",
    "ServeDirection",
    "StepResult",
    "serve_ball",
    "step",
    "Simulation",
]

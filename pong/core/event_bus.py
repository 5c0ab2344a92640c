"""Pub/sub event system connecting the simulation to sound and stats."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List
from collections import defaultdict
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Event types emitted by the game."""

    # Game lifecycle
    GAME_START = auto()
    GAME_PAUSE = auto()
    GAME_RESUME = auto()
    GAME_RESET = auto()
    SERVE = auto()

    # Emitted by the simulation step
    WALL_BOUNCE = auto()
    PADDLE_BOUNCE = auto()
    SCORE_PLAYER = auto()
    SCORE_CPU = auto()

    @property
    def is_score(self) -> bool:
        """Whether this event ends a rally."""
        return self in (EventType.SCORE_PLAYER, EventType.SCORE_CPU)


@dataclass
class Event:
    """Event container with metadata."""

    type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)
    source: str = ""


# Type alias for event handlers
EventHandler = Callable[[Event], None]


class EventBus:
    """
    Publish/subscribe event system.

    Single-threaded: the simulation owner publishes and flushes on the same
    thread that renders.
    """

    def __init__(self, history_limit: int = 1000) -> None:
        self._handlers: Dict[EventType, List[EventHandler]] = defaultdict(list)
        self._pending_events: List[Event] = []
        self._event_history: List[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe a handler to an event type."""
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Unsubscribe a handler from an event type."""
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def publish(self, event: Event) -> None:
        """Publish an event (queued for next flush)."""
        self._pending_events.append(event)

    def publish_immediate(self, event: Event) -> None:
        """Publish and immediately dispatch an event."""
        self._dispatch_event(event)

    def flush(self) -> int:
        """Dispatch pending events in publish order. Returns number processed."""
        events = self._pending_events
        self._pending_events = []

        for event in events:
            self._dispatch_event(event)

        return len(events)

    def _dispatch_event(self, event: Event) -> None:
        """Dispatch a single event to all handlers."""
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history = self._event_history[-self._history_limit:]

        for handler in list(self._handlers[event.type]):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event.type.name}")

    def clear_pending(self) -> None:
        """Clear all pending events."""
        self._pending_events.clear()

    def get_history(
        self,
        event_type: EventType | None = None,
        limit: int = 100
    ) -> List[Event]:
        """Get recent event history, optionally filtered by type."""
        if event_type:
            events = [e for e in self._event_history if e.type == event_type]
        else:
            events = list(self._event_history)
        return events[-limit:]

    @property
    def pending_count(self) -> int:
        """Number of pending events."""
        return len(self._pending_events)


# Global event bus instance
_event_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Get the global event bus instance."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus


def reset_event_bus() -> None:
    """Reset the global event bus (for testing)."""
    global _event_bus
    _event_bus = EventBus()

"""Game loop controller around the pure simulation step."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from config.settings import Settings, get_settings
from pong.ai.tracking import TrackingOpponent
from pong.controls.input import InputBuffer, NO_INPUT, PaddleControl

from .clock import GameClock
from .event_bus import EventBus, Event, EventType, get_event_bus
from .physics import SERVE_AFTER_SCORE, Rules, ServeDirection, serve_ball, step
from .state import GameState, MatchStats

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Main game controller.

    Owns the state record, frame clock, RNG and post-score hold, calls the
    step function and publishes its events on the bus.
    """

    settings: Settings = field(default_factory=get_settings)
    event_bus: EventBus = field(default_factory=get_event_bus)
    clock: Optional[GameClock] = None
    opponent: TrackingOpponent = field(default_factory=TrackingOpponent)
    stats: MatchStats = field(default_factory=MatchStats)

    state: Optional[GameState] = field(default=None, init=False)
    rules: Rules = field(init=False)
    rng: random.Random = field(default_factory=random.Random, init=False)

    _initialized: bool = field(default=False, init=False)
    _seed: Optional[int] = field(default=None, init=False)

    def __post_init__(self) -> None:
        """Derive rules and clock from settings, hook up stats."""
        self.rules = Rules.from_settings(self.settings)
        if self.clock is None:
            self.clock = GameClock(
                nominal_frame_ms=self.settings.timing.nominal_frame_ms,
                max_elapsed=self.settings.timing.max_frame_elapsed,
            )

        self.event_bus.subscribe(EventType.PADDLE_BOUNCE, self._on_paddle_bounce)
        self.event_bus.subscribe(EventType.WALL_BOUNCE, self._on_wall_bounce)
        self.event_bus.subscribe(EventType.SCORE_PLAYER, self._on_score)
        self.event_bus.subscribe(EventType.SCORE_CPU, self._on_score)

    @property
    def initialized(self) -> bool:
        return self._initialized

    def set_seed(self, seed: int) -> None:
        """
        Seed the serve RNG for reproducible games.

        Args:
            seed: Random seed value
        """
        self._seed = seed
        self.rng.seed(seed)
        logger.debug(f"Simulation random seed set to {seed}")

    def get_seed(self) -> Optional[int]:
        """Get the current random seed, if set."""
        return self._seed

    def initialize(self, width: float | None = None, height: float | None = None) -> None:
        """
        Create the session state and make the opening serve.

        Args:
            width: Field width, defaults to the window width
            height: Field height, defaults to the window height
        """
        self.state = GameState.create(self.settings, width, height)
        self._initialized = True

        self.event_bus.publish(Event(
            type=EventType.GAME_START,
            data={"width": self.state.field.width, "height": self.state.field.height},
            source="simulation",
        ))
        self.serve()
        self.event_bus.flush()

    def serve(self, direction: ServeDirection | None = None) -> None:
        """Serve a fresh ball; random side when no direction is given."""
        self._require_state()
        serve_ball(self.state.ball, self.state.field, self.rules, self.rng, direction)
        self._announce_serve(direction)

    def _announce_serve(self, direction: ServeDirection | None) -> None:
        """Log and publish a serve that has just been made."""
        logger.debug(
            f"Serve {direction.name if direction else 'random'}: "
            f"vx={self.state.ball.vx:.2f} vy={self.state.ball.vy:.2f}"
        )
        self.event_bus.publish(Event(
            type=EventType.SERVE,
            data={"direction": direction.name if direction else None},
            source="simulation",
        ))

    def update(self, now_ms: float, source: InputBuffer) -> List[EventType]:
        """
        Per-frame entry point.

        The clock always advances so the first tick after a hold does not
        see the whole hold as elapsed time. Input is polled only when the
        simulation actually steps, so samples made during a hold are kept.

        Args:
            now_ms: Monotonic timestamp in milliseconds
            source: Player input buffer

        Returns:
            Events emitted this frame
        """
        if not self._initialized:
            return []

        elapsed = self.clock.advance(now_ms)

        if not self.is_advancing(now_ms):
            return []
        self.state.pause_until = None

        return self.advance(elapsed, source.poll(), now_ms)

    def is_advancing(self, now_ms: float) -> bool:
        """Whether the step should run at `now_ms`."""
        if self.state is None or self.state.paused:
            return False
        return not self.state.is_holding(now_ms)

    def advance(
        self,
        elapsed: float,
        control: PaddleControl = NO_INPUT,
        now_ms: float | None = None,
    ) -> List[EventType]:
        """
        Run one simulation step and publish its events.

        Args:
            elapsed: Elapsed nominal frames
            control: Player input for this tick
            now_ms: Current timestamp; when given, a score starts the hold

        Returns:
            Events emitted by the step
        """
        self._require_state()

        result = step(self.state, elapsed, control, self.rules, self.rng, self.opponent)
        self.state = result.state

        for event_type in result.events:
            self.event_bus.publish(Event(
                type=event_type,
                data=self._event_data(event_type),
                source="simulation",
            ))

            if event_type.is_score:
                player, cpu = self.state.score.as_tuple()
                logger.info(f"{event_type.name}: player {player} - cpu {cpu}")
                if now_ms is not None:
                    self.state.pause_until = now_ms + self.settings.timing.pause_after_score_ms
                self._announce_serve(SERVE_AFTER_SCORE[event_type])

        self.event_bus.flush()
        return result.events

    def _event_data(self, event_type: EventType) -> Dict[str, Any]:
        """Payload attached to a step event."""
        if event_type == EventType.PADDLE_BOUNCE:
            return {"speed": self.state.ball.speed}
        if event_type.is_score:
            return {"score": self.state.score.as_tuple()}
        return {}

    def pause(self) -> None:
        """Pause the game."""
        self._require_state()
        self.state.paused = True
        logger.info("Game paused")
        self.event_bus.publish_immediate(Event(
            type=EventType.GAME_PAUSE,
            source="simulation",
        ))

    def resume(self) -> None:
        """Resume the game."""
        self._require_state()
        self.state.paused = False
        logger.info("Game resumed")
        self.event_bus.publish_immediate(Event(
            type=EventType.GAME_RESUME,
            source="simulation",
        ))

    def toggle_pause(self) -> bool:
        """Toggle pause state. Returns new pause state."""
        self._require_state()
        if self.state.paused:
            self.resume()
        else:
            self.pause()
        return self.state.paused

    def skip_hold(self) -> None:
        """End a post-score hold early (e.g. on a click)."""
        self._require_state()
        self.state.pause_until = None

    def reset(self) -> None:
        """Start a new match on the same field."""
        self._require_state()
        width, height = self.state.field.width, self.state.field.height

        self.event_bus.clear_pending()
        self.clock.reset()
        self.stats.reset()
        self.state = GameState.create(self.settings, width, height)

        self.event_bus.publish(Event(
            type=EventType.GAME_RESET,
            source="simulation",
        ))
        self.serve()
        self.event_bus.flush()

    def run_ticks(
        self,
        n_ticks: int,
        elapsed: float = 1.0,
        control: PaddleControl = NO_INPUT,
    ) -> List[List[EventType]]:
        """
        Run a fixed number of ticks without a window or clock (headless).

        The post-score hold is skipped since no wall-clock time passes.

        Args:
            n_ticks: Number of ticks to run
            elapsed: Elapsed value for every tick
            control: Player input applied on every tick

        Returns:
            Events emitted by each tick
        """
        if not self._initialized:
            raise RuntimeError("Simulation must be initialized before running ticks")

        return [self.advance(elapsed, control) for _ in range(n_ticks)]

    def _require_state(self) -> None:
        if self.state is None:
            raise RuntimeError("Simulation has not been initialized")

    def _on_paddle_bounce(self, event: Event) -> None:
        self.stats.record_paddle_hit(event.data.get("speed", 0.0))

    def _on_wall_bounce(self, event: Event) -> None:
        self.stats.record_wall_bounce()

    def _on_score(self, event: Event) -> None:
        self.stats.end_rally()

#!/usr/bin/env python3
"""
Pong - player vs. CPU with synthesized sound effects.

The player controls the left paddle with the mouse or Arrow Up / Arrow Down;
the right paddle is a simple tracking AI.

Run with: uv run python main.py
"""

import sys
import argparse
import logging
from pathlib import Path

import pygame

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import Settings, get_settings
from pong.audio import SoundBackend
from pong.controls import Direction, InputBuffer
from pong.core.event_bus import get_event_bus, reset_event_bus
from pong.core.simulation import Simulation
from pong.visualization import Renderer

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class Application:
    """Main application class."""

    def __init__(self, args: argparse.Namespace) -> None:
        self.args = args
        self.settings = self._load_settings(args)
        self.running = False

        # Pygame setup
        pygame.init()
        pygame.display.set_caption(self.settings.display.title)

        self.screen = pygame.display.set_mode((
            self.settings.display.window_width,
            self.settings.display.window_height
        ))

        self.clock = pygame.time.Clock()

        # Core components
        self.simulation: Simulation | None = None
        self.renderer: Renderer | None = None
        self.sound: SoundBackend | None = None
        self.input = InputBuffer()

    @staticmethod
    def _load_settings(args: argparse.Namespace) -> Settings:
        """Settings from --config (or the bundled defaults) plus CLI overrides."""
        if args.config:
            settings = Settings.load(Path(args.config))
        else:
            settings = get_settings()

        if args.width:
            settings.display.window_width = args.width
        if args.height:
            settings.display.window_height = args.height
        if args.mute:
            settings.audio.enabled = False
        return settings

    def initialize(self) -> None:
        """Initialize simulation, sound and renderer."""
        reset_event_bus()
        event_bus = get_event_bus()

        self.simulation = Simulation(settings=self.settings, event_bus=event_bus)
        if self.args.seed is not None:
            self.simulation.set_seed(self.args.seed)

        # Sound subscribes before the opening serve; it stays silent until unlocked
        self.sound = SoundBackend(self.settings.audio)
        self.sound.attach(event_bus)

        self.simulation.initialize()

        self.renderer = Renderer(self.screen, self.settings)
        self.renderer.initialize(self.simulation.stats)

    def run(self) -> None:
        """Main application loop."""
        self.initialize()
        self.running = True

        while self.running:
            self._handle_events()

            now_ms = pygame.time.get_ticks()
            self.simulation.update(now_ms, self.input)

            self.renderer.render(self.simulation.state)
            pygame.display.flip()

            # Cap frame rate
            self.clock.tick(self.settings.display.fps_target)

        self.sound.shutdown()
        pygame.quit()

    def _handle_events(self) -> None:
        """Handle pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                self._unlock_audio()
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                if event.key in KEY_DIRECTIONS:
                    self.input.key_changed(KEY_DIRECTIONS[event.key], held=False)

            elif event.type == pygame.MOUSEMOTION:
                self.input.pointer_moved(event.pos[1])
                self._unlock_audio()

            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._unlock_audio()
                self._handle_click()

            elif event.type == pygame.WINDOWFOCUSLOST:
                self.input.release_all()

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press events."""
        if event.key in KEY_DIRECTIONS:
            self.input.key_changed(KEY_DIRECTIONS[event.key], held=True)

        elif event.key == pygame.K_ESCAPE:
            self.running = False

        elif event.key in (pygame.K_SPACE, pygame.K_p):
            self.simulation.toggle_pause()

        elif event.key == pygame.K_r:
            self.simulation.reset()
            logger.info("Match reset")

    def _handle_click(self) -> None:
        """Clicking resumes a paused game or cuts the post-score hold short."""
        if self.simulation.state.paused:
            self.simulation.resume()
        else:
            self.simulation.skip_hold()

    def _unlock_audio(self) -> None:
        """Open the audio device on the first user gesture."""
        if self.sound and not self.sound.is_ready and self.settings.audio.enabled:
            self.sound.unlock()


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Pong - player vs. CPU with synthesized sound effects"
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to game configuration YAML file"
    )

    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Window width"
    )

    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Window height"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for serves"
    )

    parser.add_argument(
        "--mute",
        action="store_true",
        help="Disable sound effects"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        app = Application(args)
        app.run()
    except KeyboardInterrupt:
        print("\nExiting...")
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()

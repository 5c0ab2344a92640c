"""Global settings and constants for the Pong game."""

from dataclasses import dataclass, field
from pathlib import Path
import yaml

@dataclass
class DisplaySettings:
    """Display and window settings."""
    window_width: int = 800
    window_height: int = 500
    fps_target: int = 60
    title: str = "Pong"

@dataclass
class CourtSettings:
    """Paddle and ball geometry."""
    paddle_width: int = 10
    paddle_height: int = 100
    padding: int = 12
    player_speed: float = 6.0
    cpu_speed: float = 5.0
    ball_radius: float = 8.0
    ball_base_speed: float = 6.0

@dataclass
class RulesSettings:
    """Collision, serve and scoring parameters."""
    position_scale: float = 10.0
    speed_increment: float = 0.2
    max_bounce_angle_deg: float = 75.0
    serve_angle_deg: float = 30.0
    score_margin: float = 50.0
    unstick_margin: float = 0.5

@dataclass
class TimingSettings:
    """Frame normalization and post-score hold."""
    pause_after_score_ms: float = 700.0
    nominal_frame_ms: float = 16.6667
    max_frame_elapsed: float = 10.0

@dataclass
class AudioSettings:
    """Synthesized sound effect settings."""
    enabled: bool = True
    sample_rate: int = 44100
    volume: float = 1.0

@dataclass
class Settings:
    """Main settings container."""
    display: DisplaySettings = field(default_factory=DisplaySettings)
    court: CourtSettings = field(default_factory=CourtSettings)
    rules: RulesSettings = field(default_factory=RulesSettings)
    timing: TimingSettings = field(default_factory=TimingSettings)
    audio: AudioSettings = field(default_factory=AudioSettings)

    _SECTIONS = ("display", "court", "rules", "timing", "audio")

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        """
        Load settings from YAML file, falling back to defaults.

        Raises:
            ValueError: If the file or one of its sections is not a mapping
        """
        settings = cls()

        if config_path and config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"{config_path}: expected a mapping of sections")

            for section_name in cls._SECTIONS:
                values = data.get(section_name) or {}
                if not isinstance(values, dict):
                    raise ValueError(f"{config_path}: section '{section_name}' must be a mapping")
                section = getattr(settings, section_name)
                for key, value in values.items():
                    if hasattr(section, key):
                        setattr(section, key, value)

        return settings

    def save(self, config_path: Path) -> None:
        """Save current settings to YAML file."""
        data = {
            "display": {
                "window_width": self.display.window_width,
                "window_height": self.display.window_height,
                "fps_target": self.display.fps_target,
                "title": self.display.title,
            },
            "court": {
                "paddle_width": self.court.paddle_width,
                "paddle_height": self.court.paddle_height,
                "padding": self.court.padding,
                "player_speed": self.court.player_speed,
                "cpu_speed": self.court.cpu_speed,
                "ball_radius": self.court.ball_radius,
                "ball_base_speed": self.court.ball_base_speed,
            },
            "rules": {
                "position_scale": self.rules.position_scale,
                "speed_increment": self.rules.speed_increment,
                "max_bounce_angle_deg": self.rules.max_bounce_angle_deg,
                "serve_angle_deg": self.rules.serve_angle_deg,
                "score_margin": self.rules.score_margin,
                "unstick_margin": self.rules.unstick_margin,
            },
            "timing": {
                "pause_after_score_ms": self.timing.pause_after_score_ms,
                "nominal_frame_ms": self.timing.nominal_frame_ms,
                "max_frame_elapsed": self.timing.max_frame_elapsed,
            },
            "audio": {
                "enabled": self.audio.enabled,
                "sample_rate": self.audio.sample_rate,
                "volume": self.audio.volume,
            },
        }

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

_settings: Settings | None = None

def get_settings() -> Settings:
    """Get global settings instance."""
    global _settings
    if _settings is None:
        config_path = Path(__file__).parent / "game.yaml"
        _settings = Settings.load(config_path)
    return _settings

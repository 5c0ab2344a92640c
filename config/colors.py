"""Color scheme for the game."""

from dataclasses import dataclass
from typing import Tuple

# Type alias for RGB colors
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Colors:
    """Color palette for the court, entities and HUD."""

    BACKGROUND: RGB = (11, 18, 32)
    NET: RGBA = (255, 255, 255, 15)  # Faint dashes

    PADDLE: RGB = (230, 238, 248)
    BALL: RGB = (255, 221, 87)

    SCORE_TEXT: RGB = (207, 231, 255)
    HELP_TEXT: RGBA = (207, 231, 255, 115)
    BANNER_TEXT: RGB = (255, 221, 87)

    @classmethod
    def lerp(cls, color1: RGB, color2: RGB, t: float) -> RGB:
        """Linear interpolation between two colors."""
        t = max(0.0, min(1.0, t))
        return (
            int(color1[0] + (color2[0] - color1[0]) * t),
            int(color1[1] + (color2[1] - color1[1]) * t),
            int(color1[2] + (color2[2] - color1[2]) * t),
        )

    @classmethod
    def blend(cls, color: RGBA, background: RGB) -> RGB:
        """Flatten a translucent color over an opaque background."""
        return cls.lerp(background, color[:3], color[3] / 255)

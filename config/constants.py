"""Centralized constants for the game front-end."""

# Synthesized cues: (frequency Hz, waveform, duration s, gain)
PADDLE_TONE = (880.0, "square", 0.07, 0.14)
WALL_TONE = (220.0, "sine", 0.12, 0.08)
SCORE_TONES = (
    (520.0, "sawtooth", 0.12, 0.12),
    (780.0, "sawtooth", 0.14, 0.12),
)
SCORE_TONE_DELAY = 0.12  # Seconds between the two score notes

TONE_RELEASE = 0.02   # Extra tail after the gain ramp
TONE_FLOOR_GAIN = 0.001  # Exponential ramp target

# Court drawing
NET_DASH = 12
NET_GAP = 8
NET_MARGIN = 8
NET_WIDTH = 2
PADDLE_CORNER_RADIUS = 4

HELP_TEXT = "Move mouse or use Arrow Up / Arrow Down"

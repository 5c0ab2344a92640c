"""Synthesized sound effects."""

from .sound import CUES, SoundBackend, render_cue
from .synth import mix, to_pcm16, tone

__all__ = [
    "CUES",
    "SoundBackend",
    "render_cue",
    "mix",
    "to_pcm16",
    "tone",
]

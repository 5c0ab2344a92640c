"""Tone synthesis for the sound cues."""

from typing import Iterable, Tuple
import numpy as np

from config.constants import TONE_FLOOR_GAIN, TONE_RELEASE

WAVEFORMS = ("sine", "square", "sawtooth")


def tone(
    freq: float,
    waveform: str = "sine",
    duration: float = 0.12,
    gain: float = 0.12,
    sample_rate: int = 44100,
) -> np.ndarray:
    """
    Render a single decaying tone.

    The gain ramps exponentially from `gain` to TONE_FLOOR_GAIN over
    `duration` seconds and holds there for a short release tail.

    Args:
        freq: Frequency in Hz
        waveform: One of "sine", "square", "sawtooth"
        duration: Ramp length in seconds
        gain: Starting amplitude (0-1)
        sample_rate: Samples per second

    Returns:
        Float32 mono samples in [-1, 1]
    """
    if waveform not in WAVEFORMS:
        raise ValueError(f"Unknown waveform: {waveform}")

    n_samples = int(round((duration + TONE_RELEASE) * sample_rate))
    t = np.arange(n_samples, dtype=np.float64) / sample_rate
    phase = freq * t

    if waveform == "sine":
        wave = np.sin(2 * np.pi * phase)
    elif waveform == "square":
        wave = np.where(np.sin(2 * np.pi * phase) >= 0, 1.0, -1.0)
    else:
        wave = 2.0 * (phase - np.floor(phase + 0.5))

    progress = np.minimum(t / duration, 1.0) if duration > 0 else np.ones_like(t)
    envelope = gain * (TONE_FLOOR_GAIN / gain) ** progress

    return (wave * envelope).astype(np.float32)


def mix(parts: Iterable[Tuple[float, np.ndarray]], sample_rate: int = 44100) -> np.ndarray:
    """Sum (offset seconds, samples) parts into one buffer."""
    placed = [(int(round(offset * sample_rate)), samples) for offset, samples in parts]
    if not placed:
        return np.zeros(0, dtype=np.float32)

    length = max(start + len(samples) for start, samples in placed)
    out = np.zeros(length, dtype=np.float32)
    for start, samples in placed:
        out[start:start + len(samples)] += samples
    return np.clip(out, -1.0, 1.0)


def to_pcm16(samples: np.ndarray, channels: int = 1, volume: float = 1.0) -> np.ndarray:
    """Convert float samples to int16, duplicated across channels if needed."""
    pcm = (np.clip(samples * volume, -1.0, 1.0) * 32767).astype(np.int16)
    if channels > 1:
        pcm = np.ascontiguousarray(np.repeat(pcm[:, np.newaxis], channels, axis=1))
    return pcm

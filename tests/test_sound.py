"""Tests for tone synthesis and the sound backend."""

import numpy as np
import pygame
import pygame.sndarray
import pytest

from config.constants import TONE_FLOOR_GAIN
from config.settings import AudioSettings
from pong.audio import SoundBackend
from pong.audio.sound import render_cue
from pong.audio.synth import mix, to_pcm16, tone
from pong.core.event_bus import Event, EventBus, EventType


class FakeSound:
    def __init__(self, array):
        self.array = array
        self.plays = 0

    def play(self):
        self.plays += 1


@pytest.fixture
def fake_mixer(monkeypatch):
    """Pretend the mixer is open at 44.1 kHz stereo."""
    made = []

    def make_sound(array):
        sound = FakeSound(array)
        made.append(sound)
        return sound

    monkeypatch.setattr(pygame.mixer, "get_init", lambda: (44100, -16, 2))
    monkeypatch.setattr(pygame.mixer, "quit", lambda: None)
    monkeypatch.setattr(pygame.sndarray, "make_sound", make_sound)
    return made


class TestSynth:

    def test_tone_length_and_decay(self):
        samples = tone(880, "square", duration=0.07, gain=0.14, sample_rate=44100)

        assert samples.dtype == np.float32
        assert len(samples) == int(round(0.09 * 44100))
        assert abs(samples[0]) == pytest.approx(0.14, rel=1e-5)
        tail = samples[int(0.07 * 44100) + 1:]
        assert np.max(np.abs(tail)) <= TONE_FLOOR_GAIN + 1e-6

    @pytest.mark.parametrize("waveform", ["sine", "square", "sawtooth"])
    def test_waveforms_stay_within_gain(self, waveform):
        samples = tone(220, waveform, duration=0.12, gain=0.08)
        assert np.max(np.abs(samples)) <= 0.08 + 1e-6

    def test_unknown_waveform(self):
        with pytest.raises(ValueError):
            tone(440, "triangle")

    def test_mix_offsets(self):
        a = np.full(100, 0.5, dtype=np.float32)
        b = np.full(100, 0.75, dtype=np.float32)

        out = mix([(0.0, a), (50 / 1000, b)], sample_rate=1000)

        assert len(out) == 150
        assert out[0] == pytest.approx(0.5)
        assert out[75] == pytest.approx(1.0)  # Clipped overlap
        assert out[120] == pytest.approx(0.75)

    def test_mix_empty(self):
        assert len(mix([])) == 0

    def test_pcm_channels(self):
        samples = np.linspace(-1.0, 1.0, 64, dtype=np.float32)
        mono = to_pcm16(samples)
        stereo = to_pcm16(samples, channels=2, volume=0.5)

        assert mono.dtype == np.int16 and mono.shape == (64,)
        assert stereo.shape == (64, 2)
        assert stereo[-1, 0] == stereo[-1, 1] == int(0.5 * 32767)

    def test_score_cue_is_two_tones(self):
        samples = render_cue(EventType.SCORE_CPU, 44100)
        assert len(samples) == int(round(0.12 * 44100)) + int(round(0.16 * 44100))

    def test_events_without_cue(self):
        assert render_cue(EventType.GAME_RESET, 44100) is None


class TestSoundBackend:

    def test_silent_until_unlocked(self):
        backend = SoundBackend(AudioSettings())
        assert not backend.is_ready
        assert backend.try_play(EventType.PADDLE_BOUNCE) is False

    def test_disabled_never_unlocks(self):
        backend = SoundBackend(AudioSettings(enabled=False))
        assert backend.unlock() is False
        assert not backend.is_ready

    def test_unlock_failure_is_not_fatal(self, monkeypatch):
        def fail(**kwargs):
            raise pygame.error("no audio device")

        monkeypatch.setattr(pygame.mixer, "get_init", lambda: None)
        monkeypatch.setattr(pygame.mixer, "init", fail)

        backend = SoundBackend(AudioSettings())
        assert backend.unlock() is False
        assert backend.try_play(EventType.WALL_BOUNCE) is False

    def test_plays_and_caches_cues(self, fake_mixer):
        backend = SoundBackend(AudioSettings())
        assert backend.unlock() is True

        assert backend.try_play(EventType.PADDLE_BOUNCE) is True
        assert backend.try_play(EventType.PADDLE_BOUNCE) is True
        assert backend.try_play(EventType.GAME_START) is False

        assert len(fake_mixer) == 1
        assert fake_mixer[0].plays == 2
        assert fake_mixer[0].array.shape[1] == 2

    def test_playback_error_is_swallowed(self, fake_mixer, monkeypatch):
        def broken(array):
            raise pygame.error("mixer closed")

        monkeypatch.setattr(pygame.sndarray, "make_sound", broken)
        backend = SoundBackend(AudioSettings())
        backend.unlock()

        assert backend.try_play(EventType.SCORE_PLAYER) is False

    def test_attached_to_bus(self, fake_mixer):
        bus = EventBus()
        backend = SoundBackend(AudioSettings())
        backend.attach(bus)
        backend.unlock()

        bus.publish(Event(type=EventType.WALL_BOUNCE))
        bus.publish(Event(type=EventType.SCORE_CPU))
        bus.flush()

        assert [s.plays for s in fake_mixer] == [1, 1]

        backend.shutdown()
        assert not backend.is_ready

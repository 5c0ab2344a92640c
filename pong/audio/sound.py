"""Sound cue playback with explicit backend readiness."""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np
import pygame

from config.constants import PADDLE_TONE, SCORE_TONE_DELAY, SCORE_TONES, WALL_TONE
from config.settings import AudioSettings
from pong.core.event_bus import Event, EventBus, EventType
from .synth import mix, to_pcm16, tone

logger = logging.getLogger(__name__)

ToneSpec = Tuple[float, str, float, float]

# event -> [(start offset seconds, tone)]
CUES: Dict[EventType, List[Tuple[float, ToneSpec]]] = {
    EventType.PADDLE_BOUNCE: [(0.0, PADDLE_TONE)],
    EventType.WALL_BOUNCE: [(0.0, WALL_TONE)],
    EventType.SCORE_PLAYER: [(0.0, SCORE_TONES[0]), (SCORE_TONE_DELAY, SCORE_TONES[1])],
    EventType.SCORE_CPU: [(0.0, SCORE_TONES[0]), (SCORE_TONE_DELAY, SCORE_TONES[1])],
}


def render_cue(event_type: EventType, sample_rate: int) -> Optional[np.ndarray]:
    """Float samples for an event's cue, or None if it has no sound."""
    cue = CUES.get(event_type)
    if cue is None:
        return None
    parts = [
        (offset, tone(freq, waveform, duration, gain, sample_rate))
        for offset, (freq, waveform, duration, gain) in cue
    ]
    return mix(parts, sample_rate)


class SoundBackend:
    """
    Plays synthesized cues through the pygame mixer.

    The mixer is only opened by `unlock()`, which the app calls on the first
    user gesture. Until then, and whenever audio fails, `try_play` is a
    silent no-op.
    """

    def __init__(self, settings: AudioSettings) -> None:
        self.settings = settings
        self._ready = False
        self._sounds: Dict[EventType, pygame.mixer.Sound] = {}

    @property
    def is_ready(self) -> bool:
        """Whether cues can be played."""
        return self._ready

    def unlock(self) -> bool:
        """
        Open the audio device if it is not open yet.

        Returns:
            True if the backend is ready afterwards
        """
        if self._ready:
            return True
        if not self.settings.enabled:
            return False

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self.settings.sample_rate, size=-16)
        except pygame.error as e:
            logger.warning(f"Audio unavailable: {e}")
            return False

        self._ready = True
        logger.info(f"Audio ready: {pygame.mixer.get_init()}")
        return True

    def try_play(self, event_type: EventType) -> bool:
        """
        Play the cue for an event, if possible.

        Never raises; returns whether a cue was started.
        """
        if not self._ready:
            return False

        try:
            sound = self._sound_for(event_type)
            if sound is None:
                return False
            sound.play()
            return True
        except Exception as e:
            logger.debug(f"Dropped sound for {event_type.name}: {e}")
            return False

    def _sound_for(self, event_type: EventType) -> Optional[pygame.mixer.Sound]:
        """Build (once) and return the Sound for an event."""
        if event_type in self._sounds:
            return self._sounds[event_type]

        mixer_config = pygame.mixer.get_init()
        if not mixer_config:
            return None
        frequency, _, channels = mixer_config

        samples = render_cue(event_type, frequency)
        if samples is None:
            return None

        pcm = to_pcm16(samples, channels, self.settings.volume)
        sound = pygame.sndarray.make_sound(pcm)
        self._sounds[event_type] = sound
        return sound

    def on_event(self, event: Event) -> None:
        """Event bus handler."""
        self.try_play(event.type)

    def attach(self, event_bus: EventBus) -> None:
        """Subscribe to every event that has a cue."""
        for event_type in CUES:
            event_bus.subscribe(event_type, self.on_event)

    def shutdown(self) -> None:
        """Release the audio device."""
        if self._ready:
            self._sounds.clear()
            pygame.mixer.quit()
            self._ready = False

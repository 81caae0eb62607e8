from __future__ import annotations

import logging
from typing import Dict, Tuple

import numpy as np
import pygame

from retro_tetris.game.ports import AudioPort, SoundEvent


logger = logging.getLogger(__name__)

# 8-bit style effects: (frequency in Hz, duration in seconds)
TONES: Dict[SoundEvent, Tuple[float, float]] = {
    SoundEvent.MOVE: (220.0, 0.1),
    SoundEvent.ROTATE: (330.0, 0.1),
    SoundEvent.DROP: (110.0, 0.2),
    SoundEvent.CLEAR: (440.0, 0.3),
    SoundEvent.GAME_OVER: (165.0, 0.5),
}


def square_wave(freq: float, duration: float, sample_rate: int = 44100,
                volume: float = 0.1, tail: float = 0.01) -> np.ndarray:
    """Mono int16 square wave whose gain decays exponentially from `volume` to `tail`."""
    n = int(sample_rate * duration)
    t = np.arange(n) / float(sample_rate)
    wave = np.sign(np.sin(2 * np.pi * freq * t))
    envelope = volume * (tail / volume) ** (t / duration)
    return (wave * envelope * 32767).astype(np.int16)


class ToneAudio(AudioPort):
    """Synthesised square-wave effects played through pygame.mixer.

    If the mixer cannot be opened (no audio device, headless CI) the player
    stays silent for the rest of the session.
    """

    def __init__(self, enabled: bool = True, sample_rate: int = 44100) -> None:
        self.enabled = enabled
        self.available = False
        self._sounds: Dict[SoundEvent, pygame.mixer.Sound] = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=sample_rate, size=-16, channels=2, buffer=512)
            mixer_rate, _, channels = pygame.mixer.get_init()
            for event, (freq, duration) in TONES.items():
                mono = square_wave(freq, duration, sample_rate=mixer_rate)
                samples = mono if channels == 1 else np.column_stack([mono] * channels)
                self._sounds[event] = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
            self.available = True
        except (pygame.error, ValueError) as e:
            logger.warning("audio disabled: %s", e)

    def play(self, event: SoundEvent) -> None:
        if not self.enabled or not self.available:
            return
        sound = self._sounds.get(SoundEvent(event))
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            logger.warning("could not play %s: %s", event, e)

    def toggle_mute(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

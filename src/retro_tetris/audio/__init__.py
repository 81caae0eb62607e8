"""Sound output for the game engine."""

from .tones import TONES, ToneAudio, square_wave

__all__ = ["TONES", "ToneAudio", "square_wave"]

import os
import unittest
from unittest import mock

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame

from retro_tetris.audio import TONES, ToneAudio, square_wave
from retro_tetris.game import SoundEvent


class TestSquareWave(unittest.TestCase):
    def test_length_and_type(self):
        wave = square_wave(220.0, 0.1, sample_rate=44100)
        self.assertEqual(4410, wave.shape[0])
        self.assertEqual(np.int16, wave.dtype)

    def test_envelope_decays(self):
        wave = square_wave(440.0, 0.3)
        self.assertLessEqual(int(np.abs(wave).max()), int(0.1 * 32767))
        head = int(np.abs(wave[:200]).max())
        tail = int(np.abs(wave[-200:]).max())
        self.assertGreater(head, 3000)
        self.assertLess(tail, 400)

    def test_every_event_has_a_tone(self):
        self.assertEqual(set(SoundEvent), set(TONES))


class TestToneAudio(unittest.TestCase):
    def test_missing_device_disables_audio(self):
        with mock.patch.object(pygame.mixer, "get_init", return_value=None), \
                mock.patch.object(pygame.mixer, "init", side_effect=pygame.error("no device")):
            audio = ToneAudio()
        self.assertFalse(audio.available)
        audio.play(SoundEvent.CLEAR)

    def test_play_never_raises(self):
        audio = ToneAudio()
        try:
            for event in SoundEvent:
                audio.play(event)
        finally:
            pygame.mixer.quit()

    def test_toggle_mute(self):
        with mock.patch.object(pygame.mixer, "get_init", return_value=None), \
                mock.patch.object(pygame.mixer, "init", side_effect=pygame.error("no device")):
            audio = ToneAudio(enabled=True)
        self.assertFalse(audio.toggle_mute())
        self.assertFalse(audio.enabled)
        self.assertTrue(audio.toggle_mute())


if __name__ == '__main__':
    unittest.main()

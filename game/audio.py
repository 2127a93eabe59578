import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)


def make_sine_sound(freq=440, duration=0.12, volume=0.2, sample_rate=44100):
    """Generate a pygame Sound with a sine wave tone."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    wave = volume * np.sin(2 * np.pi * freq * t)
    # Quick fade in/out to avoid clicks
    env = np.ones_like(wave)
    attack = min(len(wave), int(0.01 * sample_rate))
    release = min(len(wave) - attack, int(0.03 * sample_rate))
    env[:attack] = np.linspace(0, 1, attack)
    if release:
        env[-release:] = np.linspace(1, 0, release)
    wave = (wave * env * (2**15 - 1)).astype(np.int16)
    stereo = np.column_stack([wave, wave])
    return pygame.sndarray.make_sound(stereo)


def make_sweep_sound(start_freq, end_freq, duration=0.3, volume=0.3, sample_rate=44100):
    """Tone gliding from ``start_freq`` to ``end_freq``."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    freq = np.linspace(start_freq, end_freq, len(t))
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    wave = volume * np.sin(phase) * np.linspace(1, 0, len(t))
    wave = (wave * (2**15 - 1)).astype(np.int16)
    stereo = np.column_stack([wave, wave])
    return pygame.sndarray.make_sound(stereo)


class SoundBoard:
    """Game sound effects with a mute switch.

    If the mixer cannot start (no audio device) the board stays silent.
    """

    def __init__(self, muted=False):
        self.muted = muted
        self.sounds = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=44100, size=-16, channels=2)
            self.sounds['start'] = make_sine_sound(freq=880, duration=0.12, volume=0.25)
            self.sounds['eat'] = make_sine_sound(freq=660, duration=0.10, volume=0.22)
            self.sounds['record'] = make_sine_sound(freq=1100, duration=0.18, volume=0.28)
            self.sounds['die'] = make_sweep_sound(440, 110, duration=0.35, volume=0.35)
        except (pygame.error, ValueError) as e:
            logger.warning("Sound disabled: %s", e)
            self.sounds = {}

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def play(self, name):
        if self.muted or name not in self.sounds:
            return
        self.sounds[name].play()

import logging
import math
from typing import Dict, Iterable, Optional, Protocol

import numpy as np
import pygame

from .constants import FPS
from .events import Event, EventType

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
MAX_AMPLITUDE = 32767  # Max value for 16-bit audio


class Playable(Protocol):
    def play(self, loops: int = 0) -> object: ...

    def stop(self) -> None: ...


def _to_sound(wave: np.ndarray, volume: float) -> pygame.mixer.Sound:
    """Turn a mono wave in [-1, 1] into a stereo 16-bit mixer sound"""
    mono = np.clip(wave * MAX_AMPLITUDE, -32768, 32767).astype(np.int16)
    stereo = np.ascontiguousarray(np.column_stack((mono, mono)))
    sound = pygame.sndarray.make_sound(stereo)
    sound.set_volume(volume)
    return sound


def _timeline(duration: float) -> np.ndarray:
    return np.arange(int(duration * SAMPLE_RATE)) / SAMPLE_RATE


def synthesize_sounds(rng: Optional[np.random.Generator] = None) -> Dict[str, pygame.mixer.Sound]:
    """Build every sound effect; needs an initialised mixer"""
    rng = rng if rng is not None else np.random.default_rng()
    sounds = {}

    # Laser (short falling chirp)
    t = _timeline(0.12)
    freq = 880.0 - 3000.0 * t
    sounds['laser'] = _to_sound(0.3 * np.sin(2.0 * np.pi * freq * t), 0.5)

    # Thrust (rocket rumble with low-passed noise, looped while thrusting)
    t = _timeline(1.0)
    base_rumble = 0.4 * np.sin(2.0 * np.pi * 40.0 * t) + 0.3 * np.sin(2.0 * np.pi * 60.0 * t)
    mid_freq = 0.2 * np.sin(2.0 * np.pi * (120.0 + np.sin(t * 2) * 10) * t)
    noise = rng.uniform(-0.3, 0.3, t.size)
    noise = np.convolve(noise, np.ones(2) / 2, mode='same')
    sounds['thrust'] = _to_sound(0.3 * (base_rumble + mid_freq + noise), 0.4)

    # Asteroid hits, deeper for bigger rocks
    for tier, base_freq, duration in (('large', 80, 0.6), ('medium', 120, 0.5), ('small', 160, 0.4)):
        t = _timeline(duration)
        decay = np.exp(-3.0 * t)
        wave = decay * (
            0.5 * np.sin(2.0 * np.pi * base_freq * t) +
            0.3 * np.sin(2.0 * np.pi * base_freq * 1.5 * t) +
            0.1 * rng.uniform(-1, 1, t.size)
        )
        sounds[f'hit_{tier}'] = _to_sound(0.7 * wave, 0.7)

    # Ship explosion (more dramatic)
    t = _timeline(0.8)
    decay = np.exp(-2.0 * t)
    wave = decay * (
        0.4 * np.sin(2.0 * np.pi * 60.0 * t) +
        0.3 * np.sin(2.0 * np.pi * 90.0 * t) +
        0.3 * rng.uniform(-1, 1, t.size)
    )
    sounds['explode'] = _to_sound(wave, 0.8)

    # Background beats (low thump, high thump)
    for name, freq in (('beat_low', 50.0), ('beat_high', 65.0)):
        t = _timeline(0.1)
        sounds[name] = _to_sound(0.3 * np.exp(-10.0 * t) * np.sin(2.0 * np.pi * freq * t), 0.4)

    logger.debug("Synthesized %d sounds", len(sounds))
    return sounds


class SoundEffects:
    def __init__(self, sounds: Dict[str, Playable], enabled: bool = True) -> None:
        self.sounds = sounds
        self.enabled = enabled
        self.thrust_playing = False

    def play(self, sound_name: str) -> None:
        if self.enabled and sound_name in self.sounds:
            self.sounds[sound_name].play()

    def start_thrust(self) -> None:
        if self.enabled and not self.thrust_playing:
            self.sounds['thrust'].play(-1)  # Loop indefinitely
            self.thrust_playing = True

    def stop_thrust(self) -> None:
        if self.thrust_playing:
            self.sounds['thrust'].stop()
            self.thrust_playing = False

    def handle(self, events: Iterable[Event]) -> None:
        for event in events:
            if event.event_type is EventType.LASER_FIRED:
                self.play('laser')
            elif event.event_type is EventType.ASTEROID_DESTROYED:
                self.play(f'hit_{event.tier}')
            elif event.event_type is EventType.SHIP_EXPLODED:
                self.play('explode')
            elif event.event_type is EventType.THRUST_START:
                self.start_thrust()
            elif event.event_type in (EventType.THRUST_STOP, EventType.GAME_OVER):
                self.stop_thrust()

    def stop_all_sounds(self) -> None:
        for sound in self.sounds.values():
            sound.stop()
        self.thrust_playing = False


class Music:
    """Alternating low/high beat that speeds up as the level empties"""

    def __init__(self, sounds: Dict[str, Playable], enabled: bool = True, fps: int = FPS) -> None:
        self.sound_low = sounds['beat_low']
        self.sound_high = sounds['beat_high']
        self.enabled = enabled
        self.fps = fps
        self.low = True
        self.tempo = 1.0  # seconds per beat
        self.beat_time = 0  # ticks until the next beat

    def play(self) -> None:
        if not self.enabled:
            return
        if self.low:
            self.sound_low.play()
        else:
            self.sound_high.play()
        self.low = not self.low

    def set_asteroid_ratio(self, ratio: float) -> None:
        self.tempo = 1.0 - 0.75 * (1.0 - ratio)

    def tick(self) -> None:
        if self.beat_time == 0:
            self.play()
            self.beat_time = math.ceil(self.tempo * self.fps)
        else:
            self.beat_time -= 1

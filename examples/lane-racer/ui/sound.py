"""Square-wave sound effects over pygame.mixer."""
from __future__ import annotations

import array
import logging

import pygame

from lane_racer import SettingsRecord

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050

# event -> (frequency Hz, duration ms)
TONES: dict[str, tuple[float, int]] = {
    "ui": (660, 40),
    "start": (880, 120),
    "coin": (1320, 80),
    "nearMiss": (990, 100),
    "crash": (110, 250),
    "gameOver": (82, 600),
    "repair": (520, 150),
    "boost": (740, 200),
}
MUSIC_NOTES = (220, 262, 330, 262)
MUSIC_NOTE_MS = 250


def square_wave(freq: float, ms: int, volume: float = 0.3) -> pygame.mixer.Sound:
    n = int(SAMPLE_RATE * ms / 1000)
    period = max(1, int(SAMPLE_RATE / freq))
    amp = int(32767 * volume)
    samples = array.array("h", ((amp if (i // (period // 2 or 1)) % 2 == 0 else -amp) for i in range(n)))
    return pygame.mixer.Sound(buffer=samples.tobytes())


class MixerAudio:
    """AudioSink backed by pygame.mixer. Raises if the mixer cannot start."""

    def __init__(self) -> None:
        pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        self._sounds = {event: square_wave(f, ms) for event, (f, ms) in TONES.items()}
        loop = array.array("h")
        for note in MUSIC_NOTES:
            loop.extend(array.array("h", square_wave(note, MUSIC_NOTE_MS, 0.15).get_raw()))
        self._music = pygame.mixer.Sound(buffer=loop.tobytes())
        self._music_channel: pygame.mixer.Channel | None = None
        self._music_volume = 0.5
        logger.debug("mixer ready: %s", pygame.mixer.get_init())

    def play_sound(self, event: str, settings: SettingsRecord) -> None:
        sound = self._sounds[event]
        sound.set_volume(settings.master_volume * settings.sfx_volume)
        sound.play()

    def start_music(self) -> None:
        if self._music_channel is not None and self._music_channel.get_busy():
            return
        self._music.set_volume(self._music_volume)
        self._music_channel = self._music.play(loops=-1)

    def stop_music(self) -> None:
        if self._music_channel is not None:
            self._music_channel.stop()
            self._music_channel = None

    def resume(self) -> None:
        pygame.mixer.unpause()

    def update_volumes(self, settings: SettingsRecord) -> None:
        self._music_volume = settings.master_volume * settings.music_volume
        self._music.set_volume(self._music_volume)

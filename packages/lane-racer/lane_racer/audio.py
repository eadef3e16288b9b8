"""Audio collaborator protocol and the silent-degradation wrapper."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lane_racer.settings import SettingsRecord

logger = logging.getLogger(__name__)

SOUND_EVENTS = frozenset(
    {"ui", "start", "coin", "nearMiss", "crash", "gameOver", "repair", "boost"}
)


@runtime_checkable
class AudioSink(Protocol):
    """What the simulation calls into for sound. No return value matters."""

    def play_sound(self, event: str, settings: SettingsRecord) -> None: ...

    def start_music(self) -> None: ...

    def stop_music(self) -> None: ...

    def resume(self) -> None: ...

    def update_volumes(self, settings: SettingsRecord) -> None: ...


class NullAudio:
    """Sink for platforms without audio."""

    def play_sound(self, event: str, settings: SettingsRecord) -> None:
        pass

    def start_music(self) -> None:
        pass

    def stop_music(self) -> None:
        pass

    def resume(self) -> None:
        pass

    def update_volumes(self, settings: SettingsRecord) -> None:
        pass


class SafeAudio:
    """Wraps a sink so backend failures never reach the simulation.

    The first exception is logged and the wrapper goes silent for good.
    Music already playing is not started a second time.
    """

    def __init__(self, sink: AudioSink | None) -> None:
        self._sink: AudioSink = sink if sink is not None else NullAudio()
        self._failed = sink is None
        self._music_playing = False

    @property
    def available(self) -> bool:
        return not self._failed

    @property
    def music_playing(self) -> bool:
        return self._music_playing

    def _call(self, name: str, *args: object) -> None:
        if self._failed:
            return
        try:
            getattr(self._sink, name)(*args)
        except Exception:
            logger.warning("audio backend failed in %s; continuing without sound", name, exc_info=True)
            self._failed = True

    def play_sound(self, event: str, settings: SettingsRecord) -> None:
        if event not in SOUND_EVENTS:
            logger.debug("ignoring unknown sound event %r", event)
            return
        self._call("play_sound", event, settings)

    def start_music(self) -> None:
        if self._music_playing:
            return
        self._call("start_music")
        self._music_playing = not self._failed

    def stop_music(self) -> None:
        self._call("stop_music")
        self._music_playing = False

    def resume(self) -> None:
        self._call("resume")

    def update_volumes(self, settings: SettingsRecord) -> None:
        self._call("update_volumes", settings)

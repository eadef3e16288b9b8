"""Application modes, their local payloads, and the transition table.

Each mode owns a payload built fresh on entry and thrown away on exit,
so cursors and debounce stamps never leak from one screen to the next.
Transitions are declared as ``Edge`` rows evaluated in order; the first
edge whose guard passes wins.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Union

from lane_racer.config import NAV_DEBOUNCE_MS

if TYPE_CHECKING:
    from lane_racer.game import Game


class Mode(str, enum.Enum):
    BOOT = "boot"
    TITLE = "title"
    HOWTO = "howto"
    SETTINGS = "settings"
    PLAYING = "playing"
    PAUSED = "paused"
    GAMEOVER = "gameover"


TITLE_ITEMS = ("play", "howto", "settings")
PAUSE_ITEMS = ("resume", "restart", "title")
GAMEOVER_ITEMS = ("retry", "title")
SETTINGS_ITEMS = (
    "sound_enabled",
    "music_enabled",
    "reduced_motion",
    "colorblind_mode",
    "difficulty",
    "bind_left",
    "bind_right",
    "bind_brake",
    "bind_pause",
)


@dataclass
class Menu:
    items: tuple[str, ...]
    wrap: bool = True
    selected: int = 0
    last_nav: float = float("-inf")

    @property
    def item(self) -> str:
        return self.items[self.selected]

    def move(self, delta: int, now: float) -> bool:
        """Move the cursor unless a move was accepted less than the debounce window ago."""
        if now - self.last_nav < NAV_DEBOUNCE_MS:
            return False
        if self.wrap:
            self.selected = (self.selected + delta) % len(self.items)
        else:
            self.selected = max(0, min(len(self.items) - 1, self.selected + delta))
        self.last_nav = now
        return True


@dataclass
class SettingsMenu(Menu):
    items: tuple[str, ...] = SETTINGS_ITEMS
    wrap: bool = False
    capturing: str | None = None
    prev_codes: frozenset[str] = field(default_factory=frozenset)


@dataclass
class GameOverMenu(Menu):
    items: tuple[str, ...] = GAMEOVER_ITEMS
    reason: str = "crash"
    new_record: bool = False


ModePayload = Union[Menu, None]


def enter_payload(mode: Mode) -> ModePayload:
    if mode is Mode.TITLE:
        return Menu(TITLE_ITEMS)
    if mode is Mode.PAUSED:
        return Menu(PAUSE_ITEMS)
    if mode is Mode.SETTINGS:
        return SettingsMenu()
    if mode is Mode.GAMEOVER:
        return GameOverMenu()
    return None


@dataclass(frozen=True)
class Edge:
    """One transition row: when ``guard`` holds, go to ``target`` and run ``action``."""

    guard: str
    target: Mode
    action: str | None = None
    sound: str | None = "ui"


TRANSITIONS: dict[Mode, list[Edge]] = {
    Mode.BOOT: [Edge("any_input", Mode.TITLE, action="resume_audio", sound=None)],
    Mode.TITLE: [
        Edge("confirm_0", Mode.PLAYING, action="start_run", sound="start"),
        Edge("confirm_1", Mode.HOWTO, sound="start"),
        Edge("confirm_2", Mode.SETTINGS, sound="start"),
    ],
    Mode.HOWTO: [Edge("back", Mode.TITLE)],
    Mode.SETTINGS: [Edge("settings_exit", Mode.TITLE, action="save_settings")],
    Mode.PLAYING: [Edge("pause", Mode.PAUSED)],
    Mode.PAUSED: [
        Edge("pause", Mode.PLAYING),
        Edge("confirm_0", Mode.PLAYING, sound="start"),
        Edge("confirm_1", Mode.PLAYING, action="start_run", sound="start"),
        Edge("confirm_2", Mode.TITLE, action="discard_run"),
    ],
    Mode.GAMEOVER: [
        Edge("confirm_0", Mode.PLAYING, action="start_run", sound="start"),
        Edge("confirm_1", Mode.TITLE, action="discard_run"),
    ],
}


class ModeGuards:
    """Named predicates over the game, referenced by ``Edge.guard``."""

    def __init__(self) -> None:
        self._guards: dict[str, Callable[[Game], bool]] = {}

    def register(self, name: str, fn: Callable[[Game], bool]) -> None:
        self._guards[name] = fn

    def check(self, name: str, game: Game) -> bool:
        # Unknown names raise KeyError.
        return self._guards[name](game)

    def has(self, name: str) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return list(self._guards)


def _confirm_on(index: int) -> Callable[[Game], bool]:
    def guard(game: Game) -> bool:
        menu = game.menu
        return (
            game.input.just_pressed("confirm")
            and menu is not None
            and menu.selected == index
        )

    return guard


def _settings_exit(game: Game) -> bool:
    menu = game.menu
    if isinstance(menu, SettingsMenu) and menu.capturing is not None:
        return False
    return game.input.just_pressed("left") or game.input.just_pressed("pause")


def default_guards() -> ModeGuards:
    guards = ModeGuards()
    guards.register("any_input", lambda g: g.input.any_activity)
    guards.register("pause", lambda g: g.input.just_pressed("pause"))
    guards.register(
        "back",
        lambda g: g.input.just_pressed("confirm") or g.input.just_pressed("brake"),
    )
    guards.register("settings_exit", _settings_exit)
    for i in range(3):
        guards.register(f"confirm_{i}", _confirm_on(i))
    return guards

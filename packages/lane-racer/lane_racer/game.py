"""Game - services, the mode machine, and the per-tick systems.

``build_engine`` wires a ``Game`` into an ``Engine`` with the systems in
their fixed order: input, modes, effects, signal flush.
"""
from __future__ import annotations

import logging
from typing import Callable

from lane_racer.audio import AudioSink, SafeAudio
from lane_racer.config import FIXED_DT, NAV_DEBOUNCE_MS, ROAD_DASH_PERIOD, Difficulty
from lane_racer.engine import Engine
from lane_racer.input import InputActions, RawInputSample
from lane_racer.modes import (
    TRANSITIONS,
    Edge,
    GameOverMenu,
    Menu,
    Mode,
    ModeGuards,
    ModePayload,
    SettingsMenu,
    default_guards,
    enter_payload,
)
from lane_racer.run import RunState
from lane_racer.signals import SOUND, SignalBus, make_signal_system
from lane_racer.storage import MemoryStorage, Storage
from lane_racer.types import TickContext

logger = logging.getLogger(__name__)

_DIFFICULTY_CYCLE = [Difficulty.EASY, Difficulty.NORMAL, Difficulty.HARD]


class Game:
    """Top-level state handed to every system and render hook."""

    def __init__(
        self,
        storage: Storage | None = None,
        audio: AudioSink | None = None,
    ) -> None:
        self.storage: Storage = storage if storage is not None else MemoryStorage()
        self.audio = SafeAudio(audio)
        self.settings = self.storage.load_settings()
        self.audio.update_volumes(self.settings)
        self.high_scores = self.storage.load_high_scores()
        self.input = InputActions(overrides=self.storage.load_keybinds())
        self.bus = SignalBus()
        self.bus.subscribe(SOUND, self._on_sound)

        self.mode = Mode.BOOT
        self.menu: ModePayload = enter_payload(Mode.BOOT)
        self.run: RunState | None = None
        self.debug = False
        self.road_offset = 0.0
        self.last_transition: tuple[Mode, Mode] | None = None

        self._actions: dict[str, Callable[[TickContext], None]] = {
            "resume_audio": lambda ctx: self.audio.resume(),
            "start_run": self.start_run,
            "discard_run": lambda ctx: self.discard_run(),
            "save_settings": lambda ctx: self.save_settings(),
        }
        self._handlers: dict[Mode, Callable[[TickContext], None]] = {
            Mode.TITLE: self._update_menu,
            Mode.SETTINGS: self._update_settings,
            Mode.PLAYING: self._update_playing,
            Mode.PAUSED: self._update_menu,
            Mode.GAMEOVER: self._update_menu,
        }

    # -- Collaborator plumbing --

    def feed(self, sample: RawInputSample) -> None:
        self.input.feed(sample)

    def play(self, event: str) -> None:
        self.bus.sound(event)

    def _on_sound(self, signal: str, data: dict) -> None:
        if self.settings.sound_enabled:
            self.audio.play_sound(data["event"], self.settings)

    # -- Transitions --

    def transition(self, target: Mode) -> None:
        old = self.mode
        self.mode = target
        self.menu = enter_payload(target)
        self.input.clear()
        self.last_transition = (old, target)
        logger.debug("mode %s -> %s", old.value, target.value)

    def take_edge(self, edge: Edge, ctx: TickContext) -> None:
        if edge.sound is not None:
            self.play(edge.sound)
        self.transition(edge.target)
        if edge.action is not None:
            self._actions[edge.action](ctx)

    def handle(self, ctx: TickContext) -> None:
        handler = self._handlers.get(self.mode)
        if handler is not None:
            handler(ctx)

    # -- Run lifecycle --

    def start_run(self, ctx: TickContext) -> None:
        self.run = RunState.start(
            self.settings.difficulty, ctx.random, reduced_motion=self.settings.reduced_motion
        )
        if self.settings.music_enabled:
            self.audio.start_music()
        if self.mode is not Mode.PLAYING:
            self.transition(Mode.PLAYING)
        logger.info("run started on %s", self.settings.difficulty.value)

    def discard_run(self) -> None:
        self.run = None

    def end_run(self, reason: str) -> None:
        run = self.run
        if run is None:
            return
        self.audio.stop_music()
        self.play("gameOver")
        difficulty = self.settings.difficulty
        new_record = self.storage.save_high_score(difficulty, run.score, run.distance)
        if new_record:
            self.high_scores = self.storage.load_high_scores()
        self.transition(Mode.GAMEOVER)
        if isinstance(self.menu, GameOverMenu):
            self.menu.reason = reason
            self.menu.new_record = new_record
        logger.info(
            "run over (%s): score=%d distance=%d new_record=%s",
            reason, run.score, run.distance, new_record,
        )

    def save_settings(self) -> None:
        self.storage.save_settings(self.settings)
        self.storage.save_keybinds(self.input.overrides)
        self.audio.update_volumes(self.settings)

    # -- Mode handlers --

    def _navigate(self, menu: Menu, now: float) -> None:
        delta = 0
        if self.input.just_pressed("up"):
            delta = -1
        elif self.input.just_pressed("down") or self.input.just_pressed("brake"):
            delta = 1
        if delta and menu.move(delta, now):
            self.play("ui")

    def _update_menu(self, ctx: TickContext) -> None:
        if self.menu is not None:
            self._navigate(self.menu, ctx.elapsed)

    def _update_settings(self, ctx: TickContext) -> None:
        menu = self.menu
        if not isinstance(menu, SettingsMenu):
            return
        codes = self.input.held_codes
        if menu.capturing is not None:
            fresh = codes - menu.prev_codes
            if fresh:
                self.input.rebind(menu.capturing, min(fresh))
                menu.capturing = None
                self.play("ui")
            menu.prev_codes = codes
            return
        menu.prev_codes = codes

        self._navigate(menu, ctx.elapsed)
        if self.input.just_pressed("confirm") and ctx.elapsed - menu.last_nav >= NAV_DEBOUNCE_MS:
            self.play("ui")
            self._toggle(menu)
            menu.last_nav = ctx.elapsed

    def _toggle(self, menu: SettingsMenu) -> None:
        item = menu.item
        s = self.settings
        if item.startswith("bind_"):
            menu.capturing = item[len("bind_"):]
        elif item == "difficulty":
            idx = _DIFFICULTY_CYCLE.index(s.difficulty)
            s.difficulty = _DIFFICULTY_CYCLE[(idx + 1) % len(_DIFFICULTY_CYCLE)]
        else:
            setattr(s, item, not getattr(s, item))
            if item == "music_enabled" and not s.music_enabled:
                self.audio.stop_music()

    def _update_playing(self, ctx: TickContext) -> None:
        run = self.run
        if run is None:
            return
        if self.input.just_pressed("debug"):
            self.debug = not self.debug
        if self.input.held("left"):
            run.player.try_change_lane(-1)
        if self.input.held("right"):
            run.player.try_change_lane(1)
        if run.step(ctx, self.bus, braking=self.input.held("brake")):
            self.end_run(run.cause or "crash")


# -- Systems --


def make_input_system() -> Callable[[Game, TickContext], None]:
    def input_system(game: Game, ctx: TickContext) -> None:
        game.input.update(ctx.elapsed)

    return input_system


def make_mode_system(
    guards: ModeGuards,
    transitions: dict[Mode, list[Edge]] = TRANSITIONS,
) -> Callable[[Game, TickContext], None]:
    """Return a system that takes the first passing edge, or else runs the mode's handler.

    A tick that changes mode does not also run the new mode's handler.
    """

    def mode_system(game: Game, ctx: TickContext) -> None:
        for edge in transitions.get(game.mode, ()):
            if guards.check(edge.guard, game):
                game.take_edge(edge, ctx)
                return
        game.handle(ctx)

    return mode_system


def make_effects_system() -> Callable[[Game, TickContext], None]:
    def effects_system(game: Game, ctx: TickContext) -> None:
        run = game.run
        if run is not None:
            run.age_effects(ctx.dt, game.settings.reduced_motion)
        if game.mode is Mode.PLAYING and run is not None:
            game.road_offset = (game.road_offset + run.player.speed * 0.5) % ROAD_DASH_PERIOD
        elif game.mode is Mode.TITLE:
            game.road_offset = (game.road_offset + 1) % ROAD_DASH_PERIOD

    return effects_system


def build_engine(
    game: Game | None = None,
    seed: int | None = None,
    fixed_dt: float = FIXED_DT,
    guards: ModeGuards | None = None,
) -> Engine[Game]:
    if game is None:
        game = Game()
    engine = Engine(game, fixed_dt=fixed_dt, seed=seed)
    engine.add_system(make_input_system())
    engine.add_system(make_mode_system(guards if guards is not None else default_guards()))
    engine.add_system(make_effects_system())
    engine.add_system(make_signal_system(game.bus))
    return engine

"""Input action layer: raw device samples in, named debounced actions out.

The raw side is whatever the platform can report: the set of held key
codes, the virtual touch buttons, and finished touch gestures.  Once per
tick ``update`` folds those into eight boolean actions and derives the
just-pressed edges against the previous tick.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ACTIONS: tuple[str, ...] = (
    "left", "right", "up", "down", "brake", "pause", "confirm", "debug",
)

DEFAULT_KEYMAP: dict[str, str] = {
    "ArrowLeft": "left",
    "KeyA": "left",
    "ArrowRight": "right",
    "KeyD": "right",
    "ArrowUp": "up",
    "KeyW": "up",
    "ArrowDown": "brake",
    "KeyS": "brake",
    "Escape": "pause",
    "KeyP": "pause",
    "Enter": "confirm",
    "Space": "confirm",
    "Backquote": "debug",
}

TOUCH_BUTTONS: tuple[str, ...] = ("left", "right", "brake")

TAP_MAX_DISTANCE = 50.0
TAP_MAX_DURATION = 300.0
SWIPE_MIN_DISTANCE = 50.0
SWIPE_MAX_DURATION = 300.0
SWIPE_MIN_VELOCITY = 0.5  # px per ms
SWIPE_PULSE = 200.0


@dataclass(frozen=True)
class TouchGesture:
    """A finished touch: where and when it started and ended (ms)."""

    start_x: float
    start_y: float
    start_time: float
    end_x: float
    end_y: float
    end_time: float
    on_surface: bool = True

    @property
    def dx(self) -> float:
        return self.end_x - self.start_x

    @property
    def dy(self) -> float:
        return self.end_y - self.start_y

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


@dataclass(frozen=True)
class RawInputSample:
    held: frozenset[str] = frozenset()
    touch_buttons: frozenset[str] = frozenset()
    gestures: tuple[TouchGesture, ...] = ()


@dataclass
class ActionState:
    held: bool = False
    just_pressed: bool = False


@dataclass
class InputActions:
    """Named actions with edge detection and a remappable keymap.

    ``overrides`` maps raw code to action and wins over ``keymap`` for
    that code.
    """

    keymap: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
    overrides: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._held_codes: frozenset[str] = frozenset()
        self._buttons: frozenset[str] = frozenset()
        self._suppressed_codes: set[str] = set()
        self._suppressed_buttons: set[str] = set()
        self._pending_tap = False
        self._pending_swipe: str | None = None
        self._swipe: str | None = None
        self._swipe_at = 0.0
        self._fresh_activity = False
        self._current: dict[str, bool] = dict.fromkeys(ACTIONS, False)
        self._previous: dict[str, bool] = dict.fromkeys(ACTIONS, False)

    # -- Raw side --

    def feed(self, sample: RawInputSample) -> None:
        """Take the latest raw sample. Gestures are queued until the next tick."""
        self._held_codes = frozenset(sample.held)
        self._buttons = frozenset(b for b in sample.touch_buttons if b in TOUCH_BUTTONS)
        # A suppressed source comes back only after it has been released.
        self._suppressed_codes &= self._held_codes
        self._suppressed_buttons &= self._buttons
        if (
            self._held_codes - self._suppressed_codes
            or self._buttons - self._suppressed_buttons
            or sample.gestures
        ):
            self._fresh_activity = True
        for gesture in sample.gestures:
            self._recognize(gesture)

    def _recognize(self, gesture: TouchGesture) -> None:
        if not gesture.on_surface:
            return
        dx, dy, duration = gesture.dx, gesture.dy, gesture.duration
        if (
            math.hypot(dx, dy) < TAP_MAX_DISTANCE
            and duration < TAP_MAX_DURATION
            and not self._buttons
        ):
            self._pending_tap = True
        if (
            abs(dx) > abs(dy)
            and abs(dx) > SWIPE_MIN_DISTANCE
            and duration < SWIPE_MAX_DURATION
        ):
            velocity = dx / max(duration, 1.0)
            if velocity > SWIPE_MIN_VELOCITY:
                self._pending_swipe = "right"
            elif velocity < -SWIPE_MIN_VELOCITY:
                self._pending_swipe = "left"

    @property
    def held_codes(self) -> frozenset[str]:
        return self._held_codes

    @property
    def any_activity(self) -> bool:
        """True once anything at all has been fed since the last clear."""
        return self._fresh_activity

    # -- Per-tick recompute --

    def update(self, now: float) -> None:
        self._previous = self._current
        current = dict.fromkeys(ACTIONS, False)

        for code in self._held_codes - self._suppressed_codes:
            action = self.action_for(code)
            if action is not None:
                current[action] = True

        for button in self._buttons - self._suppressed_buttons:
            current[button] = True

        if self._pending_tap and not self._buttons:
            current["confirm"] = True
        self._pending_tap = False

        if self._pending_swipe is not None:
            self._swipe = self._pending_swipe
            self._swipe_at = now
            self._pending_swipe = None
        if self._swipe is not None:
            if now - self._swipe_at < SWIPE_PULSE:
                current[self._swipe] = True
            else:
                self._swipe = None

        self._current = current

    def held(self, action: str) -> bool:
        return self._current[action]

    def just_pressed(self, action: str) -> bool:
        return self._current[action] and not self._previous[action]

    def state(self, action: str) -> ActionState:
        return ActionState(held=self.held(action), just_pressed=self.just_pressed(action))

    def snapshot(self) -> dict[str, ActionState]:
        return {a: self.state(a) for a in ACTIONS}

    def clear(self) -> None:
        """Forget every action and edge; anything still held is ignored until released."""
        self._current = dict.fromkeys(ACTIONS, False)
        self._previous = dict.fromkeys(ACTIONS, False)
        self._suppressed_codes = set(self._held_codes)
        self._suppressed_buttons = set(self._buttons)
        self._pending_tap = False
        self._pending_swipe = None
        self._swipe = None
        self._fresh_activity = False

    # -- Keymap --

    def action_for(self, code: str) -> str | None:
        return self.overrides.get(code) or self.keymap.get(code)

    def rebind(self, action: str, code: str) -> None:
        """Bind ``code`` to ``action``, dropping any earlier override for ``action``."""
        if action not in ACTIONS:
            raise ValueError(f"unknown action {action!r}")
        for existing in [c for c, a in self.overrides.items() if a == action]:
            del self.overrides[existing]
        self.overrides[code] = action
        # The key that was just bound is still down; don't let it fire.
        self._suppressed_codes |= self._held_codes
        logger.debug("bound %s to %s", code, action)

    def binding_for(self, action: str) -> str | None:
        for code, a in self.overrides.items():
            if a == action:
                return code
        for code, a in self.keymap.items():
            if a == action and code not in self.overrides:
                return code
        return None

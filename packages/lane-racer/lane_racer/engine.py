"""Engine - fixed-timestep driver, system ordering, and render hooks."""

from __future__ import annotations

import math
import random
from typing import Generic, TypeVar

from lane_racer.clock import Clock
from lane_racer.config import FIXED_DT, MAX_FRAME_MS
from lane_racer.rng import make_rng, new_seed
from lane_racer.types import RenderHook, System

S = TypeVar("S")

# Fraction of a tick forgiven to float rounding in the accumulated total.
TICK_EPSILON = 1e-6


class Engine(Generic[S]):
    """Runs whole logic ticks out of accumulated wall-clock time.

    ``state`` is handed to every system and render hook, the way the
    world is handed to systems in an ECS loop.  Render hooks run once per
    frame no matter how many ticks the frame produced (zero included).
    """

    def __init__(
        self,
        state: S,
        fixed_dt: float = FIXED_DT,
        seed: int | None = None,
        max_frame: float = MAX_FRAME_MS,
    ) -> None:
        if max_frame <= 0:
            raise ValueError("max_frame must be positive")
        self._state = state
        self._clock = Clock(fixed_dt)
        self._max_frame = max_frame
        self._systems: list[System[S]] = []
        self._render_hooks: list[RenderHook[S]] = []
        self._accumulator = 0.0
        self._fed = 0.0
        self._frame_ticks = 0
        self._last_frame: float | None = None

        if seed is None:
            seed = new_seed()
        self._seed = seed
        self._rng = make_rng(seed)

    @property
    def state(self) -> S:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def accumulator(self) -> float:
        return self._accumulator

    def add_system(self, system: System[S]) -> None:
        self._systems.append(system)

    def on_render(self, hook: RenderHook[S]) -> None:
        """Register a hook called as ``hook(state, alpha)`` once per frame.

        ``alpha`` is the leftover fraction of a tick in the accumulator.
        """
        self._render_hooks.append(hook)

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(self._state, ctx)

    def step(self) -> None:
        self._tick()

    def run(self, n: int) -> None:
        for _ in range(n):
            self._tick()

    def advance(self, delta: float) -> int:
        """Feed ``delta`` ms of wall-clock time; returns the ticks run.

        Ticks due are counted from the total time fed, so the count depends
        only on that total and never on how it was split into frames.
        """
        delta = min(max(delta, 0.0), self._max_frame)
        self._fed += delta
        dt = self._clock.dt
        due = math.floor(self._fed / dt + TICK_EPSILON) - self._frame_ticks
        for _ in range(due):
            self._tick()
        self._frame_ticks += due
        self._accumulator = max(0.0, self._fed - self._frame_ticks * dt)
        alpha = min(self._accumulator / dt, 1.0)
        for hook in self._render_hooks:
            hook(self._state, alpha)
        return due

    def frame(self, now: float) -> int:
        """Advance from a monotonic clock sample in ms.

        The first sample only establishes the baseline.
        """
        if self._last_frame is None:
            delta = 0.0
        else:
            delta = now - self._last_frame
        self._last_frame = now
        return self.advance(delta)

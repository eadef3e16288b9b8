"""The per-tick context and the hook signatures the engine drives."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable, TypeVar

S = TypeVar("S")


@dataclass(frozen=True, slots=True)
class TickContext:
    """What one fixed tick knows. ``dt`` and ``elapsed`` are milliseconds.

    ``random`` is the engine's seeded stream; anything that changes
    gameplay must draw from it and nothing else.
    """

    tick_number: int
    dt: float
    elapsed: float
    random: _random.Random


System = Callable[[S, TickContext], None]
RenderHook = Callable[[S, float], None]

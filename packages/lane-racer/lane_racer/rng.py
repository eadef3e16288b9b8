"""Seeded randomness for everything that affects gameplay."""

from __future__ import annotations

import os
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def new_seed() -> int:
    return int.from_bytes(os.urandom(8))


def make_rng(seed: int | None = None) -> random.Random:
    if seed is None:
        seed = new_seed()
    return random.Random(seed)


def pick_by_thresholds(roll: float, table: Sequence[tuple[float, T]]) -> T:
    """Return the first entry whose upper bound exceeds ``roll``.

    ``table`` holds ``(upper_bound, value)`` pairs sorted by bound, e.g.
    ``[(0.4, "a"), (0.6, "b"), (1.0, "c")]`` maps [0, 0.4) to ``"a"``.
    A roll at or past the last bound falls into the last entry.
    """
    if not table:
        raise ValueError("threshold table must not be empty")
    for bound, value in table:
        if roll < bound:
            return value
    return table[-1][1]

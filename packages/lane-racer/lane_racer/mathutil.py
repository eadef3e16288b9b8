"""Interpolation, easing, and box-overlap helpers. Pure functions."""
from __future__ import annotations


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def boxes_overlap(
    ax: float, ay: float, aw: float, ah: float,
    bx: float, by: float, bw: float, bh: float,
) -> bool:
    """Overlap test for two boxes given by center and full size.

    Touching edges do not count as overlap.
    """
    if abs(ax - bx) >= (aw + bw) / 2:
        return False
    return abs(ay - by) < (ah + bh) / 2

"""Score accrual, scoring events, and the decaying multiplier."""
from __future__ import annotations

from typing import TYPE_CHECKING

from lane_racer.config import (
    DISTANCE_RATE,
    MULTIPLIER_DECAY_STEP,
    MULTIPLIER_DECAY_TIME,
    MULTIPLIER_STEP,
    SCORE_COIN,
    SCORE_DISTANCE_MULT,
    SCORE_NEAR_MISS,
)
from lane_racer.entities import Obstacle, Pickup, PickupKind
from lane_racer.signals import SignalBus

if TYPE_CHECKING:
    from lane_racer.run import RunState

PICKUP_SOUNDS = {
    PickupKind.COIN: "coin",
    PickupKind.HEAL: "repair",
    PickupKind.BOOST: "boost",
}


def accrue_distance(run: RunState, dt: float) -> None:
    travelled = run.player.speed * dt * DISTANCE_RATE
    run.distance += travelled
    run.score += travelled * SCORE_DISTANCE_MULT * run.multiplier


def bump_multiplier(run: RunState) -> None:
    run.multiplier = min(run.profile.multiplier_cap, run.multiplier + MULTIPLIER_STEP)
    run.multiplier_decay = 0.0


def decay_multiplier(run: RunState, dt: float) -> None:
    run.multiplier_decay += dt
    if run.multiplier_decay >= MULTIPLIER_DECAY_TIME:
        run.multiplier = max(1.0, run.multiplier - MULTIPLIER_DECAY_STEP)
        run.multiplier_decay = 0.0


def award(run: RunState, points: float) -> float:
    """Score a bonus at the current multiplier, then step the multiplier up."""
    gained = points * run.multiplier
    run.score += gained
    bump_multiplier(run)
    return gained


def collect_pickup(run: RunState, pickup: Pickup, bus: SignalBus) -> None:
    bus.sound(PICKUP_SOUNDS[pickup.kind])
    if pickup.kind is PickupKind.COIN:
        gained = award(run, SCORE_COIN)
        run.float_text(pickup.x, pickup.y, f"+{int(gained)}", "coin")
    elif pickup.kind is PickupKind.HEAL:
        if run.player.heal():
            run.float_text(pickup.x, pickup.y, "HEAL", "heal")
    elif pickup.kind is PickupKind.BOOST:
        run.player.activate_boost()
        award(run, SCORE_COIN * 2)
        run.float_text(pickup.x, pickup.y, "BOOST!", "boost")


def score_near_miss(run: RunState, obstacle: Obstacle, bus: SignalBus) -> None:
    obstacle.near_missed = True
    award(run, SCORE_NEAR_MISS)
    bus.sound("nearMiss")
    run.float_text(obstacle.x, obstacle.y, "NEAR MISS!", "near_miss")
    run.burst(obstacle.x, obstacle.y, "near_miss")

"""Per-tick collision, near-miss, and pickup resolution against the player."""
from __future__ import annotations

from typing import TYPE_CHECKING

from lane_racer.config import NEAR_MISS_BAND, NEAR_MISS_MARGIN, NEAR_MISS_SLACK, SHAKE_TIME
from lane_racer.entities import Obstacle, Pickup, Player
from lane_racer.mathutil import boxes_overlap
from lane_racer.scoring import collect_pickup, score_near_miss
from lane_racer.signals import SignalBus

if TYPE_CHECKING:
    from lane_racer.run import RunState


def overlaps(player: Player, other: Obstacle | Pickup) -> bool:
    return boxes_overlap(
        player.x, player.y, player.width, player.height,
        other.x, other.y, other.width, other.height,
    )


def is_near_miss(player: Player, obstacle: Obstacle) -> bool:
    """Obstacle level with the player and just outside touching distance."""
    if abs(obstacle.y - player.y) >= NEAR_MISS_BAND:
        return False
    gap = abs(obstacle.x - player.x)
    reach = (obstacle.width + player.width) / 2
    return reach - NEAR_MISS_SLACK < gap < reach + NEAR_MISS_MARGIN


def resolve_obstacles(run: RunState, dt: float, bus: SignalBus) -> bool:
    """Move obstacles and test them against the player.

    Returns True as soon as a hit is fatal; the remaining obstacles are
    left untouched for that tick.
    """
    player = run.player
    for eid, obstacle in run.obstacles.items():
        obstacle.update(dt, player.speed)

        if overlaps(player, obstacle):
            landed = not player.invulnerable
            obstacle.struck = True
            if player.take_damage():
                run.cause = "crash"
                return True
            if landed:
                bus.sound("crash")
                run.add_shake(SHAKE_TIME)
                run.burst(obstacle.x, obstacle.y, "crash")
        elif not obstacle.near_missed and not obstacle.struck and is_near_miss(player, obstacle):
            score_near_miss(run, obstacle, bus)

        if obstacle.is_off_screen():
            run.obstacles.remove(eid)
    return False


def resolve_pickups(run: RunState, dt: float, bus: SignalBus) -> None:
    player = run.player
    for eid, pickup in run.pickups.items():
        pickup.update(dt, player.speed)
        if overlaps(player, pickup):
            collect_pickup(run, pickup, bus)
            run.pickups.remove(eid)
        elif pickup.is_off_screen():
            run.pickups.remove(eid)

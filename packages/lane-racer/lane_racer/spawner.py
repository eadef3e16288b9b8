"""Procedural spawning of obstacles and pickups on accumulator timers."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from lane_racer.arena import Arena
from lane_racer.config import (
    LANES,
    OBSTACLE_SPAWN_BAND,
    OBSTACLE_SPAWN_DECREASE,
    OBSTACLE_SPAWN_INIT,
    OBSTACLE_SPAWN_MIN,
    PICKUP_SPAWN_BAND,
    PICKUP_SPAWN_INIT,
)
from lane_racer.entities import Obstacle, ObstacleKind, Pickup, PickupKind
from lane_racer.rng import pick_by_thresholds

logger = logging.getLogger(__name__)

OBSTACLE_TABLE: list[tuple[float, ObstacleKind]] = [
    (0.4, ObstacleKind.PLAIN),
    (0.6, ObstacleKind.SLOW),
    (0.85, ObstacleKind.WEAVING),
    (1.0, ObstacleKind.BURST),
]

PICKUP_TABLE: list[tuple[float, PickupKind]] = [
    (0.6, PickupKind.COIN),
    (0.85, PickupKind.HEAL),
    (1.0, PickupKind.BOOST),
]


@dataclass
class SpawnTimer:
    """Recurring accumulator. Fires once ``elapsed`` reaches the interval, then restarts at 0."""

    name: str
    elapsed: float = 0.0

    def advance(self, dt: float, interval: float) -> bool:
        self.elapsed += dt
        if self.elapsed >= interval:
            self.elapsed = 0.0
            return True
        return False


def free_lanes(obstacles: Arena[Obstacle], band: float) -> list[int]:
    """Lanes with no obstacle above ``band`` (i.e. near the spawn edge)."""
    occupied = {o.lane for o in obstacles if o.y < band}
    return [lane for lane in range(LANES) if lane not in occupied]


class SpawnScheduler:
    def __init__(self, spawn_factor: float = 1.0) -> None:
        self.spawn_factor = spawn_factor
        self.obstacle_timer = SpawnTimer("obstacle")
        self.pickup_timer = SpawnTimer("pickup")
        self.skipped = 0

    def obstacle_interval(self, distance: float) -> float:
        base = max(OBSTACLE_SPAWN_MIN, OBSTACLE_SPAWN_INIT - distance * OBSTACLE_SPAWN_DECREASE)
        return base * self.spawn_factor

    def pickup_interval(self) -> float:
        return PICKUP_SPAWN_INIT

    def update(
        self,
        dt: float,
        distance: float,
        obstacles: Arena[Obstacle],
        pickups: Arena[Pickup],
        rng: random.Random,
    ) -> None:
        if self.obstacle_timer.advance(dt, self.obstacle_interval(distance)):
            self.spawn_obstacle(obstacles, rng)
        if self.pickup_timer.advance(dt, self.pickup_interval()):
            self.spawn_pickup(obstacles, pickups, rng)

    def spawn_obstacle(self, obstacles: Arena[Obstacle], rng: random.Random) -> Obstacle | None:
        lanes = free_lanes(obstacles, OBSTACLE_SPAWN_BAND)
        if not lanes:
            self.skipped += 1
            logger.debug("obstacle spawn skipped: every lane occupied")
            return None
        lane = rng.choice(lanes)
        kind = pick_by_thresholds(rng.random(), OBSTACLE_TABLE)
        obstacle = Obstacle(lane=lane, kind=kind)
        obstacles.add(obstacle)
        return obstacle

    def spawn_pickup(
        self, obstacles: Arena[Obstacle], pickups: Arena[Pickup], rng: random.Random
    ) -> Pickup | None:
        lanes = free_lanes(obstacles, PICKUP_SPAWN_BAND)
        if not lanes:
            self.skipped += 1
            logger.debug("pickup spawn skipped: every lane occupied")
            return None
        lane = rng.choice(lanes)
        kind = pick_by_thresholds(rng.random(), PICKUP_TABLE)
        pickup = Pickup(lane=lane, kind=kind)
        pickups.add(pickup)
        return pickup

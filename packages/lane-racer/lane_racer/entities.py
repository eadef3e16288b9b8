"""Player, obstacles, pickups, and cosmetic effects.

Speeds are pixels per reference tick (``FIXED_DT``); every ``update``
scales motion by ``dt / FIXED_DT`` so a tick of any size stays consistent.
Entities never reference each other.
"""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from lane_racer.config import (
    BOOST_DURATION,
    BOOST_MULTIPLIER,
    BRAKE_MULTIPLIER,
    BURST_FACTOR,
    BURST_WARNING_TIME,
    FIELD_H,
    FIXED_DT,
    FLOATING_TEXT_LIFE,
    INVULNERABILITY_TIME,
    LANE_CHANGE_COOLDOWN,
    LANE_CHANGE_DURATION,
    LANES,
    OBSTACLE_H,
    OBSTACLE_SPAWN_Y,
    OBSTACLE_W,
    OFFSCREEN_MARGIN,
    PICKUP_SIZE,
    PICKUP_SPAWN_Y,
    PICKUP_SPIN_RATE,
    PLAYER_H,
    PLAYER_SPEED_INC,
    PLAYER_SPEED_INIT,
    PLAYER_SPEED_MAX,
    PLAYER_W,
    PLAYER_Y,
    SLOW_FACTOR,
    SLOW_OBSTACLE_H,
    SLOW_OBSTACLE_W,
    WEAVE_AMPLITUDE,
    WEAVE_RATE,
    lane_center,
)
from lane_racer.mathutil import clamp, ease_out_cubic, lerp


class ObstacleKind(str, enum.Enum):
    PLAIN = "plain"
    SLOW = "slow"
    WEAVING = "weaving"
    BURST = "burst"


class PickupKind(str, enum.Enum):
    COIN = "coin"
    HEAL = "heal"
    BOOST = "boost"


@dataclass
class Player:
    """The player's car. Starts in the middle lane."""

    max_health: int = 3
    lane: int = LANES // 2
    target_lane: int = LANES // 2
    lane_progress: float = 1.0
    lane_cooldown: float = 0.0
    x: float = 0.0
    y: float = float(PLAYER_Y)
    width: float = PLAYER_W
    height: float = PLAYER_H
    base_speed: float = PLAYER_SPEED_INIT
    speed: float = PLAYER_SPEED_INIT
    health: int = field(init=False)
    invulnerable: bool = False
    invulnerable_time: float = 0.0
    boost_active: bool = False
    boost_time: float = 0.0

    def __post_init__(self) -> None:
        self.health = self.max_health
        self.x = lane_center(self.lane)

    @property
    def changing_lane(self) -> bool:
        return self.lane_progress < 1.0

    def update(self, dt: float, braking: bool = False) -> None:
        target_x = lane_center(self.target_lane)
        if self.lane_progress < 1.0:
            self.lane_progress = min(1.0, self.lane_progress + dt / LANE_CHANGE_DURATION)
            if self.lane_progress >= 1.0:
                self.lane = self.target_lane
            self.x = lerp(lane_center(self.lane), target_x, ease_out_cubic(self.lane_progress))
        else:
            self.x = target_x

        if self.lane_cooldown > 0:
            self.lane_cooldown -= dt

        self.base_speed = min(
            PLAYER_SPEED_MAX, self.base_speed + PLAYER_SPEED_INC * dt / FIXED_DT
        )
        # Boost takes precedence over braking.
        if self.boost_active:
            self.speed = self.base_speed * BOOST_MULTIPLIER
            self.boost_time -= dt
            if self.boost_time <= 0:
                self.boost_active = False
                self.boost_time = 0.0
        elif braking:
            self.speed = self.base_speed * BRAKE_MULTIPLIER
        else:
            self.speed = self.base_speed

        if self.invulnerable:
            self.invulnerable_time -= dt
            if self.invulnerable_time <= 0:
                self.invulnerable = False
                self.invulnerable_time = 0.0

    def try_change_lane(self, direction: int) -> bool:
        """Start a lane change one lane over. Returns False when rejected."""
        if self.changing_lane or self.lane_cooldown > 0:
            return False
        new_lane = self.target_lane + direction
        if new_lane < 0 or new_lane >= LANES:
            return False
        self.target_lane = new_lane
        self.lane_progress = 0.0
        self.lane_cooldown = LANE_CHANGE_COOLDOWN
        return True

    def take_damage(self) -> bool:
        """Lose one health point. Returns True iff the hit was fatal."""
        if self.invulnerable:
            return False
        self.health = max(0, self.health - 1)
        self.invulnerable = True
        self.invulnerable_time = INVULNERABILITY_TIME
        return self.health <= 0

    def heal(self) -> bool:
        if self.health >= self.max_health:
            return False
        self.health += 1
        return True

    def activate_boost(self, duration: float = BOOST_DURATION) -> None:
        self.boost_active = True
        self.boost_time = duration


@dataclass
class Obstacle:
    lane: int
    kind: ObstacleKind = ObstacleKind.PLAIN
    x: float = 0.0
    y: float = OBSTACLE_SPAWN_Y
    width: float = OBSTACLE_W
    height: float = OBSTACLE_H
    speed: float = 0.0
    weave_phase: float = 0.0
    weave_offset: float = 0.0
    burst_remaining: float = 0.0
    near_missed: bool = False
    struck: bool = False

    def __post_init__(self) -> None:
        self.x = lane_center(self.lane)
        if self.kind is ObstacleKind.SLOW:
            self.width = SLOW_OBSTACLE_W
            self.height = SLOW_OBSTACLE_H
        elif self.kind is ObstacleKind.BURST:
            self.burst_remaining = BURST_WARNING_TIME

    @property
    def warning(self) -> bool:
        """True while a burst obstacle is still telegraphing."""
        return self.kind is ObstacleKind.BURST and self.burst_remaining > 0

    def update(self, dt: float, player_speed: float) -> None:
        speed = player_speed
        if self.kind is ObstacleKind.SLOW:
            speed *= SLOW_FACTOR
        elif self.kind is ObstacleKind.BURST:
            if self.burst_remaining > 0:
                self.burst_remaining = max(0.0, self.burst_remaining - dt)
            if self.burst_remaining <= 0:
                speed *= BURST_FACTOR
        self.speed = speed
        self.y += speed * dt / FIXED_DT

        if self.kind is ObstacleKind.WEAVING:
            self.weave_phase += dt * WEAVE_RATE
            self.weave_offset = math.sin(self.weave_phase) * WEAVE_AMPLITUDE
            self.x = lane_center(self.lane) + self.weave_offset

    def is_off_screen(self) -> bool:
        return self.y > FIELD_H + OFFSCREEN_MARGIN


@dataclass
class Pickup:
    lane: int
    kind: PickupKind = PickupKind.COIN
    x: float = 0.0
    y: float = PICKUP_SPAWN_Y
    width: float = PICKUP_SIZE
    height: float = PICKUP_SIZE
    rotation: float = 0.0
    speed: float = 0.0

    def __post_init__(self) -> None:
        self.x = lane_center(self.lane)

    def update(self, dt: float, player_speed: float) -> None:
        self.speed = player_speed
        self.y += player_speed * dt / FIXED_DT
        self.rotation = (self.rotation + dt * PICKUP_SPIN_RATE) % math.tau

    def is_off_screen(self) -> bool:
        return self.y > FIELD_H + OFFSCREEN_MARGIN


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    color: str
    size: float = 5.0
    max_life: float = field(init=False)

    def __post_init__(self) -> None:
        self.max_life = self.life

    def update(self, dt: float) -> None:
        self.x += self.vx * dt * 0.1
        self.y += self.vy * dt * 0.1
        self.life -= dt
        self.vx *= 0.98
        self.vy *= 0.98

    def is_dead(self) -> bool:
        return self.life <= 0

    @property
    def alpha(self) -> float:
        return clamp(self.life / self.max_life, 0.0, 1.0)


@dataclass
class FloatingText:
    x: float
    y: float
    text: str
    color: str = "text"
    life: float = FLOATING_TEXT_LIFE
    vy: float = -0.5
    max_life: float = field(init=False)

    def __post_init__(self) -> None:
        self.max_life = self.life

    def update(self, dt: float) -> None:
        self.y += self.vy * dt * 0.1
        self.life -= dt

    def is_dead(self) -> bool:
        return self.life <= 0

    @property
    def alpha(self) -> float:
        # Fully opaque until the last 30% of its life.
        return clamp(self.life / (self.max_life * 0.3), 0.0, 1.0)

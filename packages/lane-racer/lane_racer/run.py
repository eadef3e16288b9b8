"""RunState - everything that lives for exactly one play session."""
from __future__ import annotations

import random
from dataclasses import dataclass, field

from lane_racer.arena import Arena
from lane_racer.collision import resolve_obstacles, resolve_pickups
from lane_racer.config import (
    DIFFICULTIES,
    PARTICLE_COUNT,
    PARTICLE_LIFE_MIN,
    PARTICLE_LIFE_SPREAD,
    SHAKE_AMPLITUDE,
    SHAKE_TIME,
    Difficulty,
    DifficultyProfile,
)
from lane_racer.entities import FloatingText, Obstacle, Particle, Pickup, Player
from lane_racer.scoring import accrue_distance, decay_multiplier
from lane_racer.signals import SignalBus
from lane_racer.spawner import SpawnScheduler
from lane_racer.types import TickContext


@dataclass
class RunState:
    difficulty: Difficulty = Difficulty.NORMAL
    reduced_motion: bool = False
    fx_random: random.Random = field(default_factory=random.Random)
    player: Player = field(init=False)
    spawner: SpawnScheduler = field(init=False)
    obstacles: Arena[Obstacle] = field(default_factory=Arena)
    pickups: Arena[Pickup] = field(default_factory=Arena)
    particles: Arena[Particle] = field(default_factory=Arena)
    texts: Arena[FloatingText] = field(default_factory=Arena)
    score: float = 0.0
    distance: float = 0.0
    multiplier: float = 1.0
    multiplier_decay: float = 0.0
    shake_time: float = 0.0
    shake_x: float = 0.0
    shake_y: float = 0.0
    ticks: int = 0
    cause: str | None = None

    def __post_init__(self) -> None:
        profile = self.profile
        self.player = Player(max_health=profile.health)
        self.spawner = SpawnScheduler(profile.spawn_factor)

    @classmethod
    def start(
        cls, difficulty: Difficulty, rng: random.Random, reduced_motion: bool = False
    ) -> RunState:
        # Cosmetic randomness gets its own stream so effects never shift spawns.
        return cls(
            difficulty=difficulty,
            reduced_motion=reduced_motion,
            fx_random=random.Random(rng.getrandbits(32)),
        )

    @property
    def profile(self) -> DifficultyProfile:
        return DIFFICULTIES[self.difficulty]

    @property
    def over(self) -> bool:
        return self.cause is not None

    def step(self, ctx: TickContext, bus: SignalBus, braking: bool = False) -> bool:
        """Advance gameplay one tick. Returns True when the run just ended."""
        dt = ctx.dt
        self.ticks += 1
        self.player.update(dt, braking=braking)
        accrue_distance(self, dt)
        decay_multiplier(self, dt)
        self.spawner.update(dt, self.distance, self.obstacles, self.pickups, ctx.random)

        fatal = resolve_obstacles(self, dt, bus)
        if not fatal:
            resolve_pickups(self, dt, bus)
        self.obstacles.compact()
        self.pickups.compact()
        return fatal

    # -- Cosmetic effects --

    def add_shake(self, duration: float = SHAKE_TIME) -> None:
        if not self.reduced_motion:
            self.shake_time = max(self.shake_time, duration)

    def burst(self, x: float, y: float, color: str) -> None:
        rnd = self.fx_random
        for _ in range(PARTICLE_COUNT):
            self.particles.add(Particle(
                x, y,
                vx=(rnd.random() - 0.5) * 10,
                vy=(rnd.random() - 0.5) * 10,
                life=PARTICLE_LIFE_MIN + rnd.random() * PARTICLE_LIFE_SPREAD,
                color=color,
                size=5 + rnd.random() * 5,
            ))

    def float_text(self, x: float, y: float, text: str, color: str) -> None:
        self.texts.add(FloatingText(x, y, text, color))

    def age_effects(self, dt: float, reduced_motion: bool | None = None) -> None:
        if reduced_motion is not None:
            self.reduced_motion = reduced_motion
        for arena in (self.particles, self.texts):
            for eid, effect in arena.items():
                effect.update(dt)
                if effect.is_dead():
                    arena.remove(eid)
            arena.compact()

        if self.reduced_motion:
            self.shake_time = 0.0
        if self.shake_time > 0:
            self.shake_time = max(0.0, self.shake_time - dt)
            scale = SHAKE_AMPLITUDE * (self.shake_time / SHAKE_TIME)
            self.shake_x = (self.fx_random.random() - 0.5) * scale
            self.shake_y = (self.fx_random.random() - 0.5) * scale
        else:
            self.shake_x = 0.0
            self.shake_y = 0.0

"""Gameplay constants and difficulty profiles. Times in ms, sizes in px."""
from __future__ import annotations

import enum
from dataclasses import dataclass

# Timing
FIXED_DT = 1000.0 / 60.0
MAX_FRAME_MS = 100.0
NAV_DEBOUNCE_MS = 200.0

# Field
FIELD_W = 600
FIELD_H = 650
LANES = 5
LANE_WIDTH = 100
ROAD_X = 50
ROAD_WIDTH = LANES * LANE_WIDTH
OFFSCREEN_MARGIN = 20

# Player
PLAYER_Y = FIELD_H - 140
PLAYER_W = 70
PLAYER_H = 100
PLAYER_SPEED_INIT = 2.0
PLAYER_SPEED_MAX = 8.0
PLAYER_SPEED_INC = 0.001  # per tick
LANE_CHANGE_DURATION = 180.0
LANE_CHANGE_COOLDOWN = 120.0
BRAKE_MULTIPLIER = 0.7
BOOST_MULTIPLIER = 1.5
BOOST_DURATION = 3000.0
INVULNERABILITY_TIME = 1200.0

# Obstacles
OBSTACLE_SPAWN_Y = -100.0
OBSTACLE_W = 70
OBSTACLE_H = 100
SLOW_OBSTACLE_W = 85
SLOW_OBSTACLE_H = 120
SLOW_FACTOR = 0.7
BURST_WARNING_TIME = 600.0
BURST_FACTOR = 1.3
WEAVE_AMPLITUDE = 15.0
WEAVE_RATE = 0.005  # radians per ms

# Pickups
PICKUP_SPAWN_Y = -50.0
PICKUP_SIZE = 50
PICKUP_SPIN_RATE = 0.01  # radians per ms

# Spawning
OBSTACLE_SPAWN_INIT = 1800.0
OBSTACLE_SPAWN_MIN = 800.0
OBSTACLE_SPAWN_DECREASE = 0.0002  # ms of interval per distance unit
PICKUP_SPAWN_INIT = 3000.0
OBSTACLE_SPAWN_BAND = 100.0
PICKUP_SPAWN_BAND = 150.0

# Collision
NEAR_MISS_MARGIN = 25.0
NEAR_MISS_BAND = 20.0
NEAR_MISS_SLACK = 5.0

# Scoring
DISTANCE_RATE = 0.01  # distance units per (speed * ms)
SCORE_DISTANCE_MULT = 0.1
SCORE_COIN = 100
SCORE_NEAR_MISS = 500
MULTIPLIER_STEP = 0.5
MULTIPLIER_DECAY_STEP = 0.1
MULTIPLIER_DECAY_TIME = 3000.0
MULTIPLIER_MAX = 10.0

# Effects
SHAKE_TIME = 500.0
SHAKE_AMPLITUDE = 5.0
PARTICLE_COUNT = 10
PARTICLE_LIFE_MIN = 500.0
PARTICLE_LIFE_SPREAD = 500.0
FLOATING_TEXT_LIFE = 1000.0
ROAD_DASH_PERIOD = 70.0


class Difficulty(str, enum.Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultyProfile:
    """Per-difficulty tuning: spawn interval factor, starting health, multiplier cap."""

    spawn_factor: float
    health: int
    multiplier_cap: float


DIFFICULTIES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(spawn_factor=1.2, health=5, multiplier_cap=MULTIPLIER_MAX),
    Difficulty.NORMAL: DifficultyProfile(spawn_factor=1.0, health=3, multiplier_cap=MULTIPLIER_MAX),
    Difficulty.HARD: DifficultyProfile(spawn_factor=0.8, health=2, multiplier_cap=MULTIPLIER_MAX * 1.5),
}


def lane_center(lane: int) -> float:
    return ROAD_X + LANE_WIDTH / 2 + lane * LANE_WIDTH

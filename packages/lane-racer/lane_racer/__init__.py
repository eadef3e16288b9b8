"""lane-racer - deterministic simulation core for an arcade lane-driving game."""

from lane_racer.arena import Arena
from lane_racer.audio import AudioSink, NullAudio, SafeAudio
from lane_racer.clock import Clock
from lane_racer.config import Difficulty, DifficultyProfile
from lane_racer.engine import Engine
from lane_racer.entities import (
    FloatingText,
    Obstacle,
    ObstacleKind,
    Particle,
    Pickup,
    PickupKind,
    Player,
)
from lane_racer.game import Game, build_engine
from lane_racer.input import InputActions, RawInputSample, TouchGesture
from lane_racer.modes import Mode
from lane_racer.run import RunState
from lane_racer.settings import HighScore, SettingsRecord
from lane_racer.signals import SignalBus
from lane_racer.spawner import SpawnScheduler
from lane_racer.storage import JsonStorage, MemoryStorage, Storage, StorageError
from lane_racer.types import TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "Game",
    "build_engine",
    "Mode",
    "RunState",
    "Arena",
    "Player",
    "Obstacle",
    "ObstacleKind",
    "Pickup",
    "PickupKind",
    "Particle",
    "FloatingText",
    "SpawnScheduler",
    "InputActions",
    "RawInputSample",
    "TouchGesture",
    "Difficulty",
    "DifficultyProfile",
    "SettingsRecord",
    "HighScore",
    "Storage",
    "JsonStorage",
    "MemoryStorage",
    "StorageError",
    "AudioSink",
    "NullAudio",
    "SafeAudio",
    "SignalBus",
]

"""Settings and high-score records, parsed with merge-with-defaults."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from lane_racer.config import Difficulty
from lane_racer.mathutil import clamp

TOUCH_LAYOUTS = ("standard", "with_brake")


@dataclass
class SettingsRecord:
    sound_enabled: bool = True
    music_enabled: bool = True
    reduced_motion: bool = False
    colorblind_mode: bool = False
    difficulty: Difficulty = Difficulty.NORMAL
    touch_layout: str = "standard"
    master_volume: float = 0.7
    sfx_volume: float = 0.8
    music_volume: float = 0.5

    def to_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        data["difficulty"] = self.difficulty.value
        return data

    @classmethod
    def from_dict(cls, data: Any) -> SettingsRecord:
        """Build a record from persisted data.

        Missing or malformed fields take their default; unknown keys are
        ignored, so older and newer files both load.
        """
        record = cls()
        if not isinstance(data, dict):
            return record
        for f in dataclasses.fields(cls):
            if f.name not in data:
                continue
            value = _coerce(f.name, data[f.name], getattr(record, f.name))
            setattr(record, f.name, value)
        return record


def _coerce(name: str, value: Any, default: Any) -> Any:
    if isinstance(default, bool):
        return value if isinstance(value, bool) else default
    if isinstance(default, Difficulty):
        try:
            return Difficulty(value)
        except ValueError:
            return default
    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        return clamp(float(value), 0.0, 1.0)
    if name == "touch_layout":
        return value if value in TOUCH_LAYOUTS else default
    return default


@dataclass
class HighScore:
    score: float = 0.0
    distance: float = 0.0

    def beaten_by(self, score: float, distance: float) -> bool:
        return score > self.score or distance > self.distance

    def merged(self, score: float, distance: float) -> HighScore:
        return HighScore(score=max(self.score, score), distance=max(self.distance, distance))


HighScores = dict[Difficulty, HighScore]


def default_high_scores() -> HighScores:
    return {d: HighScore() for d in Difficulty}


def high_scores_from_dict(data: Any) -> HighScores:
    scores = default_high_scores()
    if not isinstance(data, dict):
        return scores
    for difficulty in Difficulty:
        entry = data.get(difficulty.value)
        if not isinstance(entry, dict):
            continue
        values = []
        for key in ("score", "distance"):
            v = entry.get(key, 0.0)
            values.append(float(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else 0.0)
        scores[difficulty] = HighScore(score=max(0.0, values[0]), distance=max(0.0, values[1]))
    return scores


def high_scores_to_dict(scores: HighScores) -> dict[str, dict[str, float]]:
    return {d.value: dataclasses.asdict(hs) for d, hs in scores.items()}

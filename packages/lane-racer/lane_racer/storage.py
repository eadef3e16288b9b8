"""Persistence for settings, high scores, and keybinds.

Every load falls back to defaults and every failed save returns False;
neither ever raises into the simulation.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from lane_racer.config import Difficulty
from lane_racer.input import ACTIONS
from lane_racer.settings import (
    HighScores,
    SettingsRecord,
    default_high_scores,
    high_scores_from_dict,
    high_scores_to_dict,
)

logger = logging.getLogger(__name__)

PREFIX = "lane-racer"
VERSION = 1


class StorageError(Exception):
    """Raised by backends on unreadable or unwritable data."""


@runtime_checkable
class Storage(Protocol):
    def load_settings(self) -> SettingsRecord: ...

    def save_settings(self, settings: SettingsRecord) -> bool: ...

    def load_high_scores(self) -> HighScores: ...

    def save_high_score(self, difficulty: Difficulty, score: float, distance: float) -> bool: ...

    def load_keybinds(self) -> dict[str, str]: ...

    def save_keybinds(self, keybinds: dict[str, str]) -> bool: ...


class _BaseStorage:
    """Record-level logic over a raw key/value backend."""

    def _read(self, key: str) -> Any | None:
        raise NotImplementedError

    def _write(self, key: str, data: Any) -> None:
        raise NotImplementedError

    def _load(self, key: str) -> Any | None:
        try:
            return self._read(key)
        except StorageError as exc:
            logger.warning("could not load %s, using defaults: %s", key, exc)
            return None

    def _save(self, key: str, data: Any) -> bool:
        try:
            self._write(key, data)
        except StorageError as exc:
            logger.warning("could not save %s: %s", key, exc)
            return False
        return True

    def load_settings(self) -> SettingsRecord:
        return SettingsRecord.from_dict(self._load("settings"))

    def save_settings(self, settings: SettingsRecord) -> bool:
        return self._save("settings", settings.to_dict())

    def load_high_scores(self) -> HighScores:
        data = self._load("high_scores")
        if data is None:
            return default_high_scores()
        return high_scores_from_dict(data)

    def save_high_score(self, difficulty: Difficulty, score: float, distance: float) -> bool:
        """Keep the best score and best distance. Returns True if either improved."""
        scores = self.load_high_scores()
        current = scores[difficulty]
        if not current.beaten_by(score, distance):
            return False
        scores[difficulty] = current.merged(score, distance)
        return self._save("high_scores", high_scores_to_dict(scores))

    def load_keybinds(self) -> dict[str, str]:
        data = self._load("keybinds")
        if not isinstance(data, dict):
            return {}
        return {
            code: action
            for code, action in data.items()
            if isinstance(code, str) and action in ACTIONS
        }

    def save_keybinds(self, keybinds: dict[str, str]) -> bool:
        return self._save("keybinds", dict(keybinds))


class MemoryStorage(_BaseStorage):
    """In-process backend. Values go through JSON like they would on disk."""

    def __init__(self) -> None:
        self.blobs: dict[str, str] = {}

    def _read(self, key: str) -> Any | None:
        blob = self.blobs.get(key)
        if blob is None:
            return None
        try:
            return json.loads(blob)
        except json.JSONDecodeError as exc:
            raise StorageError(f"corrupt entry {key!r}") from exc

    def _write(self, key: str, data: Any) -> None:
        self.blobs[key] = json.dumps(data)


class JsonStorage(_BaseStorage):
    """One JSON file per record under ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)

    def path_for(self, key: str) -> Path:
        return self._dir / f"{PREFIX}-v{VERSION}-{key}.json"

    def _read(self, key: str) -> Any | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageError(f"{path}: {exc}") from exc

    def _write(self, key: str, data: Any) -> None:
        path = self.path_for(key)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            raise StorageError(f"{path}: {exc}") from exc

"""Persistence for the user profile and workout history.

Two records are kept, mirroring a key-value store: ``userProfile`` and
``workoutHistory``. Adapters raise :class:`StorageError` for every failure
so callers only need to handle one exception type.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Protocol

from pydantic import ValidationError

from splitlog.errors import StorageError
from splitlog.models import UserProfile, WorkoutSession

logger = logging.getLogger(__name__)

PROFILE_KEY = "userProfile"
HISTORY_KEY = "workoutHistory"


class Storage(Protocol):
    def load_profile(self) -> UserProfile | None: ...

    def load_history(self) -> list[WorkoutSession]: ...

    def save(self, profile: UserProfile | None, history: Sequence[WorkoutSession]) -> None: ...

    def clear_all(self) -> None: ...


def dump_profile(profile: UserProfile | None) -> str:
    return json.dumps(profile.to_json_dict() if profile is not None else None)


def dump_history(history: Sequence[WorkoutSession]) -> str:
    return json.dumps([s.to_json_dict() for s in history])


def parse_profile(raw: str | None) -> UserProfile | None:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
        if data is None:
            return None
        return UserProfile.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise StorageError(f"Could not parse {PROFILE_KEY}: {e}") from e


def parse_history(raw: str | None) -> list[WorkoutSession]:
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageError(f"Could not parse {HISTORY_KEY}: {e}") from e
    if not isinstance(data, list):
        raise StorageError(f"{HISTORY_KEY} must contain a JSON list")
    try:
        return [WorkoutSession.model_validate(item) for item in data]
    except ValidationError as e:
        raise StorageError(f"Invalid workout in {HISTORY_KEY}: {e}") from e


class MemoryStorage:
    """Keeps serialized records in a dict; used for tests and ephemeral runs."""

    def __init__(self) -> None:
        self.records: dict[str, str] = {}

    def load_profile(self) -> UserProfile | None:
        return parse_profile(self.records.get(PROFILE_KEY))

    def load_history(self) -> list[WorkoutSession]:
        return parse_history(self.records.get(HISTORY_KEY))

    def save(self, profile: UserProfile | None, history: Sequence[WorkoutSession]) -> None:
        self.records[PROFILE_KEY] = dump_profile(profile)
        self.records[HISTORY_KEY] = dump_history(history)

    def clear_all(self) -> None:
        self.records.clear()


class JsonFileStorage:
    """One JSON file per record inside ``data_dir``, replaced atomically on save."""

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir).expanduser()

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read(self, key: str) -> str | None:
        path = self._path(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Could not read {path}: {e}") from e
        return raw.strip() or None

    def _write(self, key: str, payload: str) -> None:
        path = self._path(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "w", dir=self.data_dir, delete=False, encoding="utf-8", suffix=".tmp",
            ) as tmp:
                tmp.write(payload + "\n")
                temp_path = Path(tmp.name)
            temp_path.replace(path)
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}") from e

    def load_profile(self) -> UserProfile | None:
        return parse_profile(self._read(PROFILE_KEY))

    def load_history(self) -> list[WorkoutSession]:
        return parse_history(self._read(HISTORY_KEY))

    def save(self, profile: UserProfile | None, history: Sequence[WorkoutSession]) -> None:
        self._write(PROFILE_KEY, dump_profile(profile))
        self._write(HISTORY_KEY, dump_history(history))
        logger.debug("Saved profile and %d workouts to %s", len(history), self.data_dir)

    def clear_all(self) -> None:
        for key in (PROFILE_KEY, HISTORY_KEY):
            try:
                self._path(key).unlink(missing_ok=True)
            except OSError as e:
                raise StorageError(f"Could not remove {self._path(key)}: {e}") from e

"""Root state container that owns, persists and broadcasts AppState.

The store is the single writer: every session, onboarding and reset
operation goes through it. Profile and history are saved after each
transition that changes them. A storage failure never interrupts a
workout: it is logged, reported on the result, and the store keeps
running on its in-memory state (``degraded``).

Not thread-safe; callers must serialize access.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime
from typing import Any

from splitlog import session as lifecycle
from splitlog.config import Config
from splitlog.errors import OnboardingIncompleteError, StorageError
from splitlog.exercises import get_exercise
from splitlog.models import ProgressionSuggestion, SetEntry, WorkoutSession, WorkoutType
from splitlog.onboarding import OnboardingDraft
from splitlog.progression import last_completed_sets, suggest_next
from splitlog.rotation import next_workout
from splitlog.session import AppState, Direction, OperationResult
from splitlog.stats import TotalStats, group_by_date, total_stats
from splitlog.storage import JsonFileStorage, Storage
from splitlog.utils import round_half_up, utc_now

logger = logging.getLogger(__name__)

SESSION_CHANGED = "session.changed"
HISTORY_CHANGED = "history.changed"
SIGNALS: tuple[str, ...] = (SESSION_CHANGED, HISTORY_CHANGED)

Listener = Callable[[AppState], None]


class WorkoutStore:
    def __init__(self, storage: Storage, state: AppState | None = None):
        self.storage = storage
        self.state = state or AppState()
        self.degraded = False
        # Set when persisted data could not be read; saving then would
        # overwrite records we never saw, so the store stays in memory.
        self._load_failed = False
        self._listeners: dict[str, list[Listener]] = {signal: [] for signal in SIGNALS}

    @classmethod
    def open(cls, storage: Storage) -> WorkoutStore:
        store = cls(storage)
        store.load()
        return store

    @classmethod
    def from_config(cls, config: Config) -> WorkoutStore:
        """Open the JSON file store under the configured data directory."""
        return cls.open(JsonFileStorage(config.data_dir))

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> bool:
        try:
            profile = self.storage.load_profile()
            history = self.storage.load_history()
        except StorageError:
            logger.exception("Error loading data")
            self.degraded = True
            self._load_failed = True
            return False

        self.state = AppState(user=profile, history=tuple(history))
        self.degraded = False
        self._load_failed = False
        logger.info(
            "Loaded %d workouts",
            len(history),
            extra={"splitlog_has_profile": profile is not None},
        )
        return True

    def _save(self) -> bool:
        if self._load_failed:
            return False
        try:
            self.storage.save(self.state.user, self.state.history)
        except StorageError:
            logger.exception("Error saving data")
            self.degraded = True
            return False
        self.degraded = False
        return True

    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------

    def subscribe(self, signal: str, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for a signal; returns a function that unsubscribes."""
        if signal not in self._listeners:
            raise ValueError(f"Unknown signal: {signal!r}. Expected one of {SIGNALS}.")
        self._listeners[signal].append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners[signal]:
                self._listeners[signal].remove(listener)

        return unsubscribe

    def _emit(self, signal: str) -> None:
        for listener in list(self._listeners[signal]):
            listener(self.state)

    def _apply(self, transition: lifecycle.Transition) -> OperationResult:
        state, result = transition
        if not result.accepted:
            logger.debug("Operation rejected: %s", result.reason)
            return result

        self.state = state
        if result.history_changed or result.profile_changed:
            result = replace(result, persisted=self._save())
        if result.session_changed:
            self._emit(SESSION_CHANGED)
        if result.history_changed:
            self._emit(HISTORY_CHANGED)
        return result

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def complete_onboarding(
        self,
        draft: OnboardingDraft,
        now: datetime | None = None,
    ) -> OperationResult:
        try:
            profile = draft.to_profile(now)
        except OnboardingIncompleteError as e:
            logger.info("Onboarding incomplete: %s", ", ".join(e.missing))
            return OperationResult(accepted=False, reason="onboarding_incomplete")
        logger.info(
            "Onboarding complete",
            extra={"splitlog_split": list(profile.current_split)},
        )
        return self._apply(lifecycle.set_profile(self.state, profile))

    def start_workout(
        self,
        workout_type: WorkoutType,
        now: datetime | None = None,
    ) -> OperationResult:
        if self.state.in_progress:
            return OperationResult(accepted=False, reason="workout_in_progress")
        result = self._apply(lifecycle.start_workout(self.state, workout_type, now))
        logger.info("Started %s workout", workout_type)
        return result

    def log_set(self, exercise_index: int, weight: float, reps: int) -> OperationResult:
        return self._apply(lifecycle.log_set(self.state, exercise_index, weight, reps))

    def log_current_set(self, weight: float, reps: int) -> OperationResult:
        """Log a set on the exercise under the cursor."""
        return self.log_set(self.state.cursor, weight, reps)

    def remove_set(self, exercise_index: int, set_index: int) -> OperationResult:
        return self._apply(lifecycle.remove_set(self.state, exercise_index, set_index))

    def advance(self, direction: Direction, now: datetime | None = None) -> OperationResult:
        result = self._apply(lifecycle.advance(self.state, direction, now))
        if result.finished is not None:
            self._log_finished(result.finished)
        return result

    def finish_workout(self, now: datetime | None = None) -> OperationResult:
        result = self._apply(lifecycle.finish_workout(self.state, now))
        if result.finished is not None:
            self._log_finished(result.finished)
        return result

    def abandon_workout(self) -> OperationResult:
        return self._apply(lifecycle.abandon_workout(self.state))

    def reset_data(self) -> OperationResult:
        """Delete all persisted data and return to the pre-onboarding state."""
        try:
            self.storage.clear_all()
        except StorageError:
            logger.exception("Failed to reset data")
            self.degraded = True
            return OperationResult(accepted=False, reason="storage_failed", persisted=False)

        self._load_failed = False
        self.degraded = False
        state, result = lifecycle.reset(self.state)
        self.state = state
        if result.session_changed:
            self._emit(SESSION_CHANGED)
        self._emit(HISTORY_CHANGED)
        logger.info("All data reset")
        return replace(result, persisted=True)

    def _log_finished(self, workout: WorkoutSession) -> None:
        logger.info(
            "Finished %s workout in %d minutes",
            workout.workout_type,
            round_half_up(workout.duration / 60),
            extra={
                "splitlog_workout_id": workout.id,
                "splitlog_set_count": workout.set_count,
            },
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def next_workout(self) -> WorkoutType | None:
        if self.state.user is None:
            return None
        return next_workout(self.state.user.current_split, self.state.history)

    def previous_sets(self, exercise_id: str) -> tuple[SetEntry, ...]:
        return last_completed_sets(self.state.history, exercise_id)

    def suggestion_for(self, exercise_id: str) -> ProgressionSuggestion | None:
        exercise = get_exercise(exercise_id)
        if exercise is None:
            return None
        return suggest_next(self.state.history, exercise)

    def stats(self) -> TotalStats:
        return total_stats(self.state.history)

    def calendar(self) -> list[tuple[date, list[WorkoutSession]]]:
        return group_by_date(self.state.history)

    def export_data(self, now: datetime | None = None) -> dict[str, Any]:
        user = self.state.user
        return {
            "user": user.to_json_dict() if user is not None else None,
            "workoutHistory": [s.to_json_dict() for s in self.state.history],
            "exportDate": (now or utc_now()).isoformat(),
        }

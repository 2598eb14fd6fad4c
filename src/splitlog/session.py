"""Session lifecycle: start, log sets, move between exercises, finish.

Every operation is a pure transition ``(AppState, input) -> (AppState,
OperationResult)``. Rejected operations return the input state unchanged
together with a reason code; nothing here raises for bad user input or
touches storage. Persistence and change notification are the job of
:class:`splitlog.store.WorkoutStore`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Literal

from splitlog.errors import RejectionReason, rejection_message
from splitlog.exercises import exercises_for
from splitlog.models import (
    ExerciseSession,
    SetEntry,
    UserProfile,
    WorkoutSession,
    WorkoutType,
)
from splitlog.utils import as_utc, epoch_millis, round_half_up, utc_now

logger = logging.getLogger(__name__)

Direction = Literal["forward", "backward"]


@dataclass(frozen=True)
class AppState:
    """Everything the app knows: profile, finished workouts, the one in progress."""

    user: UserProfile | None = None
    history: tuple[WorkoutSession, ...] = ()
    current: WorkoutSession | None = None
    cursor: int = 0  # index into current.exercises

    @property
    def in_progress(self) -> bool:
        return self.current is not None

    @property
    def current_exercise(self) -> ExerciseSession | None:
        if self.current is None or not self.current.exercises:
            return None
        return self.current.exercises[self.cursor]

    @property
    def is_last_exercise(self) -> bool:
        return self.current is not None and self.cursor == len(self.current.exercises) - 1


@dataclass(frozen=True)
class OperationResult:
    accepted: bool
    reason: RejectionReason | None = None
    session_changed: bool = False
    history_changed: bool = False
    profile_changed: bool = False
    finished: WorkoutSession | None = None
    # Filled in by the store: None when nothing needed saving.
    persisted: bool | None = None

    @property
    def message(self) -> str | None:
        if self.reason is None:
            return None
        return rejection_message(self.reason)


Transition = tuple[AppState, OperationResult]


def _reject(state: AppState, reason: RejectionReason) -> Transition:
    return state, OperationResult(accepted=False, reason=reason)


def create_workout_session(
    workout_type: WorkoutType,
    now: datetime | None = None,
) -> WorkoutSession:
    """Fresh session with one empty entry per catalog exercise, in catalog order."""
    started = now or utc_now()
    return WorkoutSession(
        id=f"workout_{epoch_millis(started)}",
        started_at=started,
        workout_type=workout_type,
        exercises=tuple(
            ExerciseSession(exercise_id=ex.exercise_id) for ex in exercises_for(workout_type)
        ),
        duration=0,
        completed=False,
    )


def start_workout(
    state: AppState,
    workout_type: WorkoutType,
    now: datetime | None = None,
) -> Transition:
    """Make a new session current.

    Preventing a second start while a session is in progress is the
    caller's job; this always replaces ``current``.
    """
    session = create_workout_session(workout_type, now)
    return (
        replace(state, current=session, cursor=0),
        OperationResult(accepted=True, session_changed=True),
    )


def _replace_exercise(
    session: WorkoutSession,
    index: int,
    entry: ExerciseSession,
) -> WorkoutSession:
    exercises = list(session.exercises)
    exercises[index] = entry
    return session.model_copy(update={"exercises": tuple(exercises)})


def _is_valid_set(weight: float, reps: int) -> bool:
    """Finite positive weight and a positive whole number of reps."""
    if not math.isfinite(weight) or weight <= 0:
        return False
    return math.isfinite(reps) and reps > 0 and float(reps).is_integer()


def log_set(
    state: AppState,
    exercise_index: int,
    weight: float,
    reps: int,
) -> Transition:
    """Append a completed set; weight must be positive and finite, reps a positive whole number."""
    session = state.current
    if session is None:
        return _reject(state, "no_active_workout")
    if not _is_valid_set(weight, reps):
        return _reject(state, "invalid_set")
    if not 0 <= exercise_index < len(session.exercises):
        return _reject(state, "out_of_range")

    entry = session.exercises[exercise_index]
    new_set = SetEntry(weight=weight, reps=int(reps), completed=True)
    updated = _replace_exercise(
        session,
        exercise_index,
        entry.model_copy(update={"sets": entry.sets + (new_set,)}),
    )
    return replace(state, current=updated), OperationResult(accepted=True, session_changed=True)


def remove_set(state: AppState, exercise_index: int, set_index: int) -> Transition:
    session = state.current
    if session is None:
        return _reject(state, "no_active_workout")
    if not 0 <= exercise_index < len(session.exercises):
        return _reject(state, "out_of_range")
    entry = session.exercises[exercise_index]
    if not 0 <= set_index < len(entry.sets):
        return _reject(state, "out_of_range")

    sets = entry.sets[:set_index] + entry.sets[set_index + 1:]
    updated = _replace_exercise(session, exercise_index, entry.model_copy(update={"sets": sets}))
    return replace(state, current=updated), OperationResult(accepted=True, session_changed=True)


def advance(
    state: AppState,
    direction: Direction,
    now: datetime | None = None,
) -> Transition:
    """Move the exercise cursor.

    Forward needs at least one set on the current exercise; forward from
    the last exercise finishes the workout. Backward at the first exercise
    is accepted and leaves the state as it was.
    """
    session = state.current
    if session is None:
        return _reject(state, "no_active_workout")

    if direction == "backward":
        if state.cursor <= 0:
            return state, OperationResult(accepted=True)
        return replace(state, cursor=state.cursor - 1), OperationResult(accepted=True)

    if direction != "forward":
        raise ValueError(f"Unknown direction: {direction!r}. Expected 'forward' or 'backward'.")

    entry = state.current_exercise
    if entry is None or not entry.sets:
        return _reject(state, "no_sets_logged")
    if state.is_last_exercise:
        return finish_workout(state, now)
    return replace(state, cursor=state.cursor + 1), OperationResult(accepted=True)


def finish_workout(state: AppState, now: datetime | None = None) -> Transition:
    """Stamp duration and completion, append to history, clear the current slot."""
    session = state.current
    if session is None:
        return _reject(state, "no_active_workout")

    ended = as_utc(now or utc_now())
    elapsed = (ended - session.started_at).total_seconds()
    finished = session.model_copy(
        update={"duration": max(round_half_up(elapsed), 0), "completed": True}
    )
    logger.debug(
        "Workout %s finished after %ds",
        finished.id,
        finished.duration,
        extra={"splitlog_workout_type": finished.workout_type},
    )
    return (
        replace(state, history=state.history + (finished,), current=None, cursor=0),
        OperationResult(
            accepted=True,
            session_changed=True,
            history_changed=True,
            finished=finished,
        ),
    )


def abandon_workout(state: AppState) -> Transition:
    """Drop the current session without recording it."""
    if state.current is None:
        return _reject(state, "no_active_workout")
    return replace(state, current=None, cursor=0), OperationResult(accepted=True, session_changed=True)


def set_profile(state: AppState, profile: UserProfile) -> Transition:
    return replace(state, user=profile), OperationResult(accepted=True, profile_changed=True)


def reset(state: AppState) -> Transition:
    """Forget the profile, history and any session in progress."""
    return AppState(), OperationResult(
        accepted=True,
        session_changed=state.current is not None,
        history_changed=True,
        profile_changed=True,
    )

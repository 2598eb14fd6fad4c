"""Progression calculator: double progression from the last logged set.

Only the final completed set of the most recent session that trained the
exercise is considered:

- no history          → baseline weight at the bottom of the rep range
- reps >= range top   → add load, restart at the bottom of the range
- reps inside range   → same load, one more rep (capped at the top)
- reps below range    → drop load (never below zero), retry at the bottom
"""

from __future__ import annotations

from collections.abc import Sequence

from splitlog.exercises import Exercise
from splitlog.models import ProgressionSuggestion, SetEntry, WorkoutSession

BASELINE_WEIGHT = 20.0
WEIGHT_INCREMENT = 2.5


def calculate_progression(
    last_sets: Sequence[SetEntry],
    exercise: Exercise,
) -> ProgressionSuggestion:
    """Suggest weight and reps for the next attempt at ``exercise``."""
    lo, hi = exercise.rep_range
    if not last_sets:
        return ProgressionSuggestion(weight=BASELINE_WEIGHT, reps=lo)

    last = last_sets[-1]
    weight, reps = last.weight, last.reps

    if reps >= hi:
        return ProgressionSuggestion(weight=weight + WEIGHT_INCREMENT, reps=lo)
    if reps >= lo:
        return ProgressionSuggestion(weight=weight, reps=min(reps + 1, hi))
    return ProgressionSuggestion(weight=max(weight - WEIGHT_INCREMENT, 0.0), reps=lo)


def last_completed_sets(
    history: Sequence[WorkoutSession],
    exercise_id: str,
) -> tuple[SetEntry, ...]:
    """Completed sets from the most recent session that logged ``exercise_id``.

    Sessions where the exercise appears with no sets at all are skipped.
    Returns an empty tuple when the exercise was never performed.
    """
    for workout in reversed(history):
        for entry in workout.exercises:
            if entry.exercise_id == exercise_id and entry.sets:
                return entry.completed_sets
    return ()


def suggest_next(
    history: Sequence[WorkoutSession],
    exercise: Exercise,
) -> ProgressionSuggestion:
    return calculate_progression(last_completed_sets(history, exercise.exercise_id), exercise)


def format_weight(weight: float) -> str:
    """Render whole weights without decimals and fractional ones with one."""
    if float(weight).is_integer():
        return str(int(weight))
    return f"{weight:.1f}"

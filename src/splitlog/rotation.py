"""Next-workout selector: rotate through the split based on history."""

from __future__ import annotations

from collections.abc import Sequence

from splitlog.models import WorkoutSession, WorkoutType


def next_workout(
    split: Sequence[WorkoutType],
    history: Sequence[WorkoutSession],
) -> WorkoutType:
    """Return the split entry after the last completed workout's type.

    With no history the first split entry is offered. If the last workout's
    type is not part of the split the index is taken as -1, which also
    lands on the first entry. Repeated types rotate from their first
    occurrence.
    """
    if not split:
        raise ValueError("split must not be empty")
    if not history:
        return split[0]

    last_type = history[-1].workout_type
    try:
        last_index = list(split).index(last_type)
    except ValueError:
        last_index = -1
    return split[(last_index + 1) % len(split)]

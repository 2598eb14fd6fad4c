from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from splitlog.exercises import exercises_for
from splitlog.models import ExerciseSession, SetEntry, UserProfile, WorkoutSession

T0 = datetime(2025, 10, 1, 18, 0, tzinfo=timezone.utc)


def make_workout(
    workout_type: str = "push",
    started_at: datetime = T0,
    sets: dict[str, list[tuple[float, int]]] | None = None,
    duration: int = 3600,
) -> WorkoutSession:
    """Finished workout for ``workout_type`` with ``sets`` keyed by exercise_id."""
    sets = sets or {}
    return WorkoutSession(
        id=f"workout_{int(started_at.timestamp() * 1000)}",
        started_at=started_at,
        workout_type=workout_type,
        exercises=tuple(
            ExerciseSession(
                exercise_id=ex.exercise_id,
                sets=tuple(SetEntry(weight=w, reps=r) for w, r in sets.get(ex.exercise_id, [])),
            )
            for ex in exercises_for(workout_type)
        ),
        duration=duration,
        completed=True,
    )


def make_profile(**overrides) -> UserProfile:
    defaults = dict(
        name="Sam",
        experience="intermediate",
        days_per_week=4,
        intensity="moderate",
        goal="muscle",
        start_date=T0 - timedelta(days=30),
        current_split=("push", "pull", "legs", "arms"),
        has_completed_onboarding=True,
    )
    defaults.update(overrides)
    return UserProfile(**defaults)


@pytest.fixture
def profile() -> UserProfile:
    return make_profile()

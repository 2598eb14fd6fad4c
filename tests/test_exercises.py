"""Tests for the exercise catalog."""

import pytest

from splitlog.exercises import (
    EXERCISES,
    EXERCISES_BY_WORKOUT,
    Exercise,
    estimated_duration,
    exercises_for,
    get_exercise,
    workout_display_name,
    workout_muscle_groups,
)
from splitlog.models import WORKOUT_TYPES


def test_every_workout_type_has_exercises():
    assert set(EXERCISES_BY_WORKOUT) == set(WORKOUT_TYPES)
    for workout_type in WORKOUT_TYPES:
        assert len(exercises_for(workout_type)) > 0


def test_exercise_ids_are_unique():
    total = sum(len(v) for v in EXERCISES_BY_WORKOUT.values())
    assert len(EXERCISES) == total


def test_all_exercises_have_valid_rep_ranges():
    for ex_id, ex in EXERCISES.items():
        assert ex.exercise_id == ex_id
        lo, hi = ex.rep_range
        assert 0 <= lo <= hi
        assert ex.name
        assert ex.equipment


def test_order_is_catalog_order():
    ids = [ex.exercise_id for ex in exercises_for("push")]
    assert ids[0] == "flat_bench_press"
    assert ids[-1] == "skull_crushers"


def test_get_exercise():
    squat = get_exercise("squats")
    assert squat.name == "Squats"
    assert squat.rep_range == (10, 15)
    assert squat.equipment == "Barbell"


def test_get_exercise_unknown_returns_none():
    assert get_exercise("unknown_exercise") is None


def test_exercises_for_unknown_type_is_empty():
    assert exercises_for("cardio") == ()


def test_inverted_rep_range_rejected():
    with pytest.raises(ValueError, match="invalid rep_range"):
        Exercise("bad", "Bad", "None", (12, 8), "None")


def test_display_metadata():
    assert workout_display_name("legs") == "Legs & Abs"
    assert workout_muscle_groups("pull") == "Back, Biceps, Rear Delts"
    assert estimated_duration("push") == "46-66 min"  # 7 exercises
    assert estimated_duration("legs") == "38-58 min"  # 6 exercises

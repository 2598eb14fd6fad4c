"""Tests for history aggregation."""

from datetime import date, timedelta

from splitlog.stats import (
    CALENDAR_DAY_LIMIT,
    group_by_date,
    recent_workouts,
    session_set_count,
    total_stats,
)

from .conftest import T0, make_workout


class TestGroupByDate:
    def test_empty(self):
        assert group_by_date([]) == []

    def test_groups_same_day_and_sorts_newest_first(self):
        morning = make_workout("push", T0.replace(hour=7))
        evening = make_workout("pull", T0.replace(hour=19))
        next_day = make_workout("legs", T0 + timedelta(days=1))
        groups = group_by_date([morning, evening, next_day])
        assert [d for d, _ in groups] == [date(2025, 10, 2), date(2025, 10, 1)]
        assert groups[1][1] == [morning, evening]

    def test_caps_to_most_recent_dates(self):
        history = [make_workout("push", T0 + timedelta(days=i)) for i in range(45)]
        groups = group_by_date(history)
        assert len(groups) == CALENDAR_DAY_LIMIT == 30
        assert groups[0][0] == (T0 + timedelta(days=44)).date()
        assert groups[-1][0] == (T0 + timedelta(days=15)).date()
        # the input history is untouched
        assert len(history) == 45

    def test_out_of_order_history_still_sorted(self):
        later = make_workout("push", T0 + timedelta(days=5))
        earlier = make_workout("pull", T0)
        groups = group_by_date([later, earlier])
        assert [d for d, _ in groups] == [later.started_at.date(), earlier.started_at.date()]


class TestTotalStats:
    def test_empty_history(self):
        stats = total_stats([])
        assert (stats.total_workouts, stats.total_sets, stats.total_minutes) == (0, 0, 0)

    def test_sums_sets_across_workouts_and_exercises(self):
        history = [
            make_workout("push", T0, {
                "flat_bench_press": [(60, 10), (60, 9)],
                "skull_crushers": [(25, 12)],
            }, duration=1800),
            make_workout("pull", T0 + timedelta(days=1), {"lat_pulldown": [(45, 12)]}, duration=2400),
        ]
        stats = total_stats(history)
        assert stats.total_workouts == 2
        assert stats.total_sets == 4
        assert stats.total_minutes == 70

    def test_minutes_round_half_up(self):
        history = [make_workout(duration=90)]  # 1.5 minutes
        assert total_stats(history).total_minutes == 2
        history = [make_workout(duration=89)]
        assert total_stats(history).total_minutes == 1


def test_session_set_count():
    workout = make_workout("arms", T0, {"wrist_curls": [(10, 20)] * 3, "hammer_curls": [(14, 10)]})
    assert session_set_count(workout) == 4


def test_recent_workouts_newest_first():
    history = [make_workout(t, T0 + timedelta(days=i)) for i, t in enumerate(["push", "pull", "legs", "arms"])]
    assert [w.workout_type for w in recent_workouts(history)] == ["arms", "legs", "pull"]
    assert recent_workouts(history, limit=0) == []
    assert recent_workouts([]) == []

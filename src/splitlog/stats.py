"""History aggregation for the calendar and all-time stats views.

Read-only reducers over workout history; nothing here mutates it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from splitlog.models import WorkoutSession
from splitlog.utils import round_half_up

CALENDAR_DAY_LIMIT = 30
RECENT_WORKOUT_LIMIT = 3


@dataclass(frozen=True)
class TotalStats:
    total_workouts: int
    total_sets: int
    total_minutes: int


def session_date(session: WorkoutSession) -> date:
    """Calendar date of a session's start instant (UTC, locale independent)."""
    return session.started_at.date()


def session_set_count(session: WorkoutSession) -> int:
    return session.set_count


def group_by_date(
    history: Sequence[WorkoutSession],
    limit: int = CALENDAR_DAY_LIMIT,
) -> list[tuple[date, list[WorkoutSession]]]:
    """Group sessions by start date, newest date first, at most ``limit`` dates.

    Sessions keep their history order within a date. Older dates beyond the
    limit are left out of the result but stay in history.
    """
    by_date: dict[date, list[WorkoutSession]] = {}
    for session in history:
        by_date.setdefault(session_date(session), []).append(session)
    ordered = sorted(by_date.items(), key=lambda item: item[0], reverse=True)
    return ordered[:limit]


def total_stats(history: Sequence[WorkoutSession]) -> TotalStats:
    total_seconds = sum(s.duration for s in history)
    return TotalStats(
        total_workouts=len(history),
        total_sets=sum(s.set_count for s in history),
        total_minutes=round_half_up(total_seconds / 60),
    )


def recent_workouts(
    history: Sequence[WorkoutSession],
    limit: int = RECENT_WORKOUT_LIMIT,
) -> list[WorkoutSession]:
    """Most recent finished workouts, newest first."""
    if limit <= 0:
        return []
    return list(reversed(history[-limit:]))

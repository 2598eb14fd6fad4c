"""Split generator: weekly training frequency to a recurring workout rotation."""

from __future__ import annotations

from splitlog.models import WorkoutType

DEFAULT_SPLIT: tuple[WorkoutType, ...] = ("push", "pull", "legs")

# Frequencies outside this table (1, 7, 8+) fall back to DEFAULT_SPLIT so
# onboarding never blocks on an unusual answer.
SPLIT_TEMPLATES: dict[int, tuple[WorkoutType, ...]] = {
    2: ("push", "pull", "legs"),
    3: ("push", "pull", "legs"),
    4: ("push", "pull", "legs", "arms"),
    5: ("push", "pull", "legs", "arms", "upper"),
    6: ("push", "pull", "legs", "arms", "upper", "lower"),
}


def generate_split(days_per_week: int) -> tuple[WorkoutType, ...]:
    """Return the ordered, non-repeating split for a weekly day count."""
    return SPLIT_TEMPLATES.get(days_per_week, DEFAULT_SPLIT)

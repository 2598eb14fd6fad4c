"""splitlog: workout split, session and progression engine."""

from splitlog.exercises import Exercise, exercises_for, get_exercise
from splitlog.models import (
    ExerciseSession,
    ProgressionSuggestion,
    SetEntry,
    UserProfile,
    WorkoutSession,
    WorkoutType,
)
from splitlog.onboarding import OnboardingDraft
from splitlog.progression import calculate_progression, last_completed_sets
from splitlog.rotation import next_workout
from splitlog.session import (
    AppState,
    OperationResult,
    abandon_workout,
    advance,
    finish_workout,
    log_set,
    remove_set,
    start_workout,
)
from splitlog.split import generate_split
from splitlog.stats import group_by_date, total_stats
from splitlog.storage import JsonFileStorage, MemoryStorage, Storage
from splitlog.store import WorkoutStore

__all__ = [
    "AppState",
    "Exercise",
    "ExerciseSession",
    "JsonFileStorage",
    "MemoryStorage",
    "OnboardingDraft",
    "OperationResult",
    "ProgressionSuggestion",
    "SetEntry",
    "Storage",
    "UserProfile",
    "WorkoutSession",
    "WorkoutStore",
    "WorkoutType",
    "abandon_workout",
    "advance",
    "calculate_progression",
    "exercises_for",
    "finish_workout",
    "generate_split",
    "get_exercise",
    "group_by_date",
    "last_completed_sets",
    "log_set",
    "next_workout",
    "remove_set",
    "start_workout",
    "total_stats",
]

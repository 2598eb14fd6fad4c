"""Core data models for workout tracking.

Records are pydantic models so the persisted JSON shape (camelCase field
names, ISO-8601 timestamps) is validated on load and reproduced on save.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from splitlog.utils import as_utc

WorkoutType = Literal["push", "pull", "legs", "arms", "upper", "lower"]
ExperienceLevel = Literal["beginner", "intermediate", "advanced"]
Intensity = Literal["easy", "moderate", "hard"]
Goal = Literal["muscle", "strength", "fitness"]

WORKOUT_TYPES: tuple[WorkoutType, ...] = ("push", "pull", "legs", "arms", "upper", "lower")


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class SetEntry(_Record):
    """One logged set. Never edited in place; edits are remove + re-add."""

    weight: float = Field(ge=0)
    reps: int = Field(ge=0)
    completed: bool = True


class ExerciseSession(_Record):
    exercise_id: str
    sets: tuple[SetEntry, ...] = ()

    @property
    def completed_sets(self) -> tuple[SetEntry, ...]:
        return tuple(s for s in self.sets if s.completed)


class WorkoutSession(_Record):
    """One occurrence of a workout day, from start to finish."""

    id: str
    started_at: datetime = Field(alias="date")
    workout_type: WorkoutType
    exercises: tuple[ExerciseSession, ...]
    duration: int = Field(default=0, ge=0)  # seconds, 0 until finished
    completed: bool = False

    @field_validator("started_at")
    @classmethod
    def normalize_started_at(cls, v: datetime) -> datetime:
        return as_utc(v)

    @property
    def set_count(self) -> int:
        return sum(len(ex.sets) for ex in self.exercises)


class UserProfile(_Record):
    name: str
    experience: ExperienceLevel
    days_per_week: int = Field(ge=1)
    intensity: Intensity
    goal: Goal
    start_date: datetime
    current_split: tuple[WorkoutType, ...]
    has_completed_onboarding: bool = False

    @field_validator("start_date")
    @classmethod
    def normalize_start_date(cls, v: datetime) -> datetime:
        return as_utc(v)

    @field_validator("current_split")
    @classmethod
    def split_not_empty(cls, v: tuple[WorkoutType, ...]) -> tuple[WorkoutType, ...]:
        if not v:
            raise ValueError("current_split must not be empty")
        return v


class ProgressionSuggestion(_Record):
    weight: float
    reps: int

"""Onboarding answers and their conversion into a user profile.

Answers that have not been chosen yet are ``None`` rather than empty
strings, so an unfinished draft cannot be mistaken for a committed profile.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from splitlog.errors import OnboardingIncompleteError
from splitlog.models import ExperienceLevel, Goal, Intensity, UserProfile
from splitlog.split import generate_split
from splitlog.utils import utc_now

MIN_DAYS_PER_WEEK = 2
MAX_DAYS_PER_WEEK = 7


class OnboardingDraft(BaseModel):
    name: str = ""
    experience: ExperienceLevel | None = None
    days_per_week: int = Field(default=3, ge=MIN_DAYS_PER_WEEK, le=MAX_DAYS_PER_WEEK)
    intensity: Intensity | None = None
    goal: Goal | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        if not self.name:
            missing.append("name")
        for field in ("experience", "intensity", "goal"):
            if getattr(self, field) is None:
                missing.append(field)
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_profile(self, now: datetime | None = None) -> UserProfile:
        """Commit the draft. Raises OnboardingIncompleteError if anything is unanswered."""
        missing = self.missing_fields()
        if missing:
            raise OnboardingIncompleteError(missing)
        return UserProfile(
            name=self.name,
            experience=self.experience,
            days_per_week=self.days_per_week,
            intensity=self.intensity,
            goal=self.goal,
            start_date=now or utc_now(),
            current_split=generate_split(self.days_per_week),
            has_completed_onboarding=True,
        )

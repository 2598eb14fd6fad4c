"""Stable rejection taxonomy and exception types for splitlog."""

from __future__ import annotations

from typing import Literal

RejectionReason = Literal[
    "invalid_set",
    "no_sets_logged",
    "no_active_workout",
    "workout_in_progress",
    "out_of_range",
    "onboarding_incomplete",
    "storage_failed",
]

REJECTION_MESSAGES: dict[RejectionReason, str] = {
    "invalid_set": "Please enter valid weight and reps",
    "no_sets_logged": "Please log at least one set before moving on",
    "no_active_workout": "No workout is in progress",
    "workout_in_progress": "Finish the current workout before starting another",
    "out_of_range": "No such exercise or set in the current workout",
    "onboarding_incomplete": "Onboarding is missing required answers",
    "storage_failed": "Saved data could not be updated",
}


def rejection_message(reason: RejectionReason) -> str:
    return REJECTION_MESSAGES.get(reason, reason)


class SplitlogError(Exception):
    """Base class for errors raised by splitlog."""


class StorageError(SplitlogError):
    """Loading, saving or clearing persisted records failed."""


class OnboardingIncompleteError(SplitlogError, ValueError):
    """An onboarding draft was committed before every answer was chosen."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Onboarding incomplete, missing: {', '.join(missing)}")

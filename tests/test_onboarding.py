"""Tests for onboarding drafts."""

import pytest
from pydantic import ValidationError

from splitlog.errors import OnboardingIncompleteError
from splitlog.onboarding import OnboardingDraft

from .conftest import T0


def _complete(**overrides) -> OnboardingDraft:
    defaults = dict(
        name="Sam",
        experience="beginner",
        days_per_week=4,
        intensity="moderate",
        goal="strength",
    )
    defaults.update(overrides)
    return OnboardingDraft(**defaults)


def test_new_draft_has_nothing_chosen():
    draft = OnboardingDraft()
    assert draft.days_per_week == 3
    assert draft.missing_fields() == ["name", "experience", "intensity", "goal"]
    assert not draft.is_complete


def test_blank_name_counts_as_missing():
    assert _complete(name="   ").missing_fields() == ["name"]


def test_to_profile_generates_split():
    profile = _complete().to_profile(now=T0)
    assert profile.current_split == ("push", "pull", "legs", "arms")
    assert profile.has_completed_onboarding is True
    assert profile.start_date == T0
    assert profile.name == "Sam"


def test_to_profile_incomplete_raises():
    with pytest.raises(OnboardingIncompleteError) as excinfo:
        _complete(goal=None).to_profile(now=T0)
    assert excinfo.value.missing == ["goal"]


@pytest.mark.parametrize("days", [1, 8])
def test_days_per_week_outside_form_range_rejected(days):
    with pytest.raises(ValidationError):
        _complete(days_per_week=days)


def test_seven_days_uses_fallback_split():
    assert _complete(days_per_week=7).to_profile(now=T0).current_split == ("push", "pull", "legs")

"""Shared utility functions for splitlog."""

from __future__ import annotations

import math
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 → 3, not 2)."""
    return int(math.floor(value + 0.5))


def as_utc(ts: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken to already be UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def epoch_millis(ts: datetime) -> int:
    return int(as_utc(ts).timestamp() * 1000)

"""Shared fixtures: a pinned clock so time-derived fields are reproducible."""

from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now

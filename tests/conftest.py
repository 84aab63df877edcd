"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest


def _clock_at(*args: int):
    instant = datetime(*args, tzinfo=timezone.utc)
    return lambda: instant


@pytest.fixture
def fixed_clock():
    """Factory: ``fixed_clock(2024, 3, 10, 7, 0)`` is a clock stuck at that UTC instant."""
    return _clock_at


@pytest.fixture
def summer_clock():
    """2024-07-15 16:30 UTC: northern-hemisphere DST in effect."""
    return _clock_at(2024, 7, 15, 16, 30)


@pytest.fixture
def winter_clock():
    """2024-01-15 16:30 UTC: no DST north of the equator."""
    return _clock_at(2024, 1, 15, 16, 30)

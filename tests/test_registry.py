"""Tests for the timezone registry."""

from zoneinfo import ZoneInfo

import pytest

from timebyzones.registry import (
    DEFAULT_ZONES,
    TIMEZONES,
    US_ZONES,
    select,
)


def test_registry_order() -> None:
    assert list(TIMEZONES) == [
        "UTC", "CDG", "LHR", "IAD", "ORD", "DEN", "SFO", "HNL", "HYD", "SIN", "NRT",
    ]


def test_every_identifier_resolves() -> None:
    for timezone_id in TIMEZONES.values():
        ZoneInfo(timezone_id)


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        TIMEZONES["XXX"] = "UTC"  # type: ignore[index]


def test_default_selection() -> None:
    assert dict(DEFAULT_ZONES) == {
        "UTC": "UTC",
        "IAD": "America/New_York",
        "SFO": "America/Los_Angeles",
    }


def test_us_selection() -> None:
    assert list(US_ZONES) == ["IAD", "ORD", "DEN", "SFO", "HNL"]
    assert US_ZONES["HNL"] == "Pacific/Honolulu"


def test_select_keeps_given_order() -> None:
    assert list(select(["NRT", "UTC"])) == ["NRT", "UTC"]


def test_select_unknown_label() -> None:
    with pytest.raises(KeyError):
        select(["XXX"])

"""
Reports — one line of formatted entries per selection of the registry.

The widget prints entries separated (and followed) by five spaces. Every entry
samples the clock on its own.
"""

from typing import Callable, Mapping

from timebyzones.formatter import Clock, get_time_in_zone
from timebyzones.registry import DEFAULT_ZONES, TIMEZONES, US_ZONES

SEPARATOR = " " * 5


def build_report(zones: Mapping[str, str], clock: Clock | None = None) -> str:
    """Format each (label, timezone) pair and join them into a single report line."""
    return "".join(
        f"{get_time_in_zone(timezone_id, label, clock)}{SEPARATOR}"
        for label, timezone_id in zones.items()
    )


def full_report(clock: Clock | None = None) -> str:
    """All configured timezones."""
    return build_report(TIMEZONES, clock)


def us_report(clock: Clock | None = None) -> str:
    """US timezones only."""
    return build_report(US_ZONES, clock)


def default_report(clock: Clock | None = None) -> str:
    """UTC, IAD and SFO."""
    return build_report(DEFAULT_ZONES, clock)


REPORTS: Mapping[str, Callable[..., str]] = {
    "all": full_report,
    "us": us_report,
}


def report_for_mode(mode: str | None, clock: Clock | None = None) -> str:
    """Run the report for a mode; unknown or missing modes get the default report."""
    report = REPORTS.get(mode or "default", default_report)
    return report(clock)

"""
Zone Time Formatter — the current wall-clock time of one timezone as a widget entry.

Entries look like ``IAD: 09:41``, ``IAD: 09:41 (DST)`` or, when the timezone
can't be resolved, ``IAD: ERROR``. Formatting never raises: a bad entry must
not stop the rest of a report from printing.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

TIME_FORMAT = "%H:%M"
DST_MARKER = " (DST)"
ERROR_MARKER = "ERROR"


def system_clock() -> datetime:
    """The current instant, timezone-aware in UTC."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ZoneTime:
    label: str
    timezone_id: str
    local: datetime
    dst: bool

    def render(self) -> str:
        marker = DST_MARKER if self.dst else ""
        return f"{self.label}: {self.local.strftime(TIME_FORMAT)}{marker}"


@dataclass(frozen=True)
class ResolutionFailure:
    label: str
    timezone_id: str
    reason: str

    def render(self) -> str:
        return f"{self.label}: {ERROR_MARKER}"


def standard_offset(tz: tzinfo, year: int) -> timedelta:
    """The smaller of the January 1 and July 1 UTC offsets of a zone in a given year."""
    return min(
        datetime(year, 1, 1, tzinfo=tz).utcoffset(),
        datetime(year, 7, 1, tzinfo=tz).utcoffset(),
    )


def observes_dst(local: datetime) -> bool:
    """Whether a zone's clocks are set ahead of its standard time at this local time.

    Compares offsets rather than trusting ``dst()``: Europe/Dublin records its
    winter time as a negative DST offset.
    """
    return local.utcoffset() > standard_offset(local.tzinfo, local.year)


def resolve_zone_time(timezone_id: str, display_label: str, clock: Clock | None = None) -> ZoneTime | ResolutionFailure:
    """Resolve the local time and DST state of a timezone at the clock's current instant.

    Args:
        timezone_id: IANA timezone name (e.g., 'Europe/Paris', 'UTC').
        display_label: Label used verbatim in the rendered entry.
        clock: Zero-argument callable returning an aware datetime. Defaults to the system clock.
    """
    try:
        tz = ZoneInfo(timezone_id)
        instant = (clock or system_clock)()
        if instant.tzinfo is None:
            raise ValueError("clock returned a naive datetime")
        local = instant.astimezone(tz)
        return ZoneTime(display_label, timezone_id, local, observes_dst(local))
    except Exception as e:
        logger.debug("Could not resolve %s (%s): %s: %s", display_label, timezone_id, type(e).__name__, e)
        return ResolutionFailure(display_label, timezone_id, f"{type(e).__name__}: {e}")


def render(result: ZoneTime | ResolutionFailure) -> str:
    return result.render()


def get_time_in_zone(timezone_id: str, display_label: str, clock: Clock | None = None) -> str:
    """Format the current time in a timezone, e.g. ``SFO: 06:41 (DST)``.

    Returns ``"<label>: ERROR"`` instead of raising when the timezone can't be resolved.
    """
    return render(resolve_zone_time(timezone_id, display_label, clock))

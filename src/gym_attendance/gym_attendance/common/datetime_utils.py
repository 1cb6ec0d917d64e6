from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Protocol
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE


class Clock(Protocol):
    """Source of "now" for every temporal computation."""

    @property
    def tz(self) -> tzinfo:
        raise NotImplementedError

    def now(self) -> datetime:
        raise NotImplementedError


@dataclass(frozen=True)
class SystemClock:
    """Wall clock bound to the gym's local timezone."""

    tz: tzinfo = field(default_factory=lambda: ZoneInfo(DEFAULT_TIMEZONE))

    @classmethod
    def for_zone(cls, name: str) -> "SystemClock":
        return cls(tz=ZoneInfo(name))

    def now(self) -> datetime:
        return datetime.now(self.tz)


@dataclass(frozen=True)
class FixedClock:
    """Clock frozen at one instant.

    Note: Used by tests and by callers that need several computations to agree
    on the same "now".
    """

    instant: datetime

    @property
    def tz(self) -> tzinfo:
        return self.instant.tzinfo or timezone.utc

    def now(self) -> datetime:
        return to_local(self.instant, self.tz)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing "Z" for UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def to_iso(value: datetime) -> str:
    """Format an instant the way the check-in clients send it (UTC, millis, "Z")."""
    utc = to_local(value, timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def to_local(value: datetime, tz: tzinfo) -> datetime:
    """Express an instant in the given zone; naive values are taken as already local."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def start_of_day(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def end_of_day(day: date, tz: tzinfo) -> datetime:
    """Last millisecond of the calendar day (23:59:59.999)."""
    return datetime.combine(day, time(23, 59, 59, 999000), tzinfo=tz)


def today_start(clock: Clock) -> datetime:
    return start_of_day(clock.now().date(), clock.tz)


def week_reset_start(now: datetime, *, reset_hour: int) -> datetime:
    """Most recent Monday at ``reset_hour`` that is not after ``now``."""
    monday = (now - timedelta(days=now.weekday())).date()
    boundary = datetime.combine(monday, time(hour=reset_hour), tzinfo=now.tzinfo)
    if boundary > now:
        boundary = datetime.combine(monday - timedelta(days=7), time(hour=reset_hour), tzinfo=now.tzinfo)
    return boundary


def month_start(now: datetime) -> datetime:
    return datetime.combine(now.date().replace(day=1), time.min, tzinfo=now.tzinfo)


def year_start(now: datetime) -> datetime:
    return datetime.combine(date(now.year, 1, 1), time.min, tzinfo=now.tzinfo)


def occurrence_in_year(birth: date, year: int) -> date:
    """Birthday falling in ``year``; Feb 29 rolls over to Mar 1 in common years."""
    try:
        return birth.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


def coerce_date(value: Optional[date | str]) -> Optional[date]:
    """Accept a date or a YYYY-MM-DD string; anything unusable becomes None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip()[:10])
    except ValueError:
        return None

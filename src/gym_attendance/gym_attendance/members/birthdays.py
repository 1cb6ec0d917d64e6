from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import Clock, occurrence_in_year
from ..core.constants import DEFAULT_BIRTHDAY_LISTING_DAYS, DEFAULT_BIRTHDAY_LOOKAHEAD_DAYS
from .model import Member


@dataclass(frozen=True)
class BirthdayEntry:
    """Read-model for the birthdays page."""

    member: Member
    next_birthday: date
    days_until: int
    age: int

    @property
    def is_today(self) -> bool:
        return self.days_until == 0

    @property
    def this_week(self) -> bool:
        return self.days_until <= 7

    @property
    def this_month(self) -> bool:
        return self.days_until <= 31

    @property
    def label(self) -> str:
        if self.is_today:
            return "Today!"
        if self.days_until == 1:
            return "Tomorrow"
        return f"In {self.days_until} days"


class BirthdayCalendar:
    def __init__(self, clock: Clock):
        self._clock = clock

    def this_year_occurrence(self, member: Member) -> Optional[date]:
        if member.date_of_birth is None:
            return None
        return occurrence_in_year(member.date_of_birth, self._clock.now().year)

    def upcoming(self, members: Iterable[Member], within_days: int = DEFAULT_BIRTHDAY_LOOKAHEAD_DAYS) -> list[Member]:
        """Members whose birthday this year falls between today and today + ``within_days``."""
        today = self._clock.now().date()
        horizon = today + timedelta(days=int(within_days))
        out = []
        for m in members:
            occurrence = self.this_year_occurrence(m)
            if occurrence is not None and today <= occurrence <= horizon:
                out.append(m)
        return out

    def entries(self, members: Iterable[Member], within_days: int = DEFAULT_BIRTHDAY_LISTING_DAYS) -> list[BirthdayEntry]:
        """Next birthday of every member (rolling into next year once passed), soonest first."""
        today = self._clock.now().date()
        out: list[BirthdayEntry] = []
        for m in members:
            if m.date_of_birth is None:
                continue
            upcoming = occurrence_in_year(m.date_of_birth, today.year)
            if upcoming < today:
                upcoming = occurrence_in_year(m.date_of_birth, today.year + 1)
            days_until = (upcoming - today).days
            if days_until > within_days:
                continue
            out.append(
                BirthdayEntry(
                    member=m,
                    next_birthday=upcoming,
                    days_until=days_until,
                    age=upcoming.year - m.date_of_birth.year,
                )
            )
        out.sort(key=lambda e: (e.days_until, e.member.id))
        return out

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..checkins.filters import records_since
from ..checkins.model import CheckInRecord
from ..common.datetime_utils import Clock, to_local, week_reset_start
from ..core.constants import DEFAULT_BIRTHDAY_LOOKAHEAD_DAYS, DEFAULT_WEEK_RESET_HOUR
from ..core.enums import MemberStatus
from .birthdays import BirthdayCalendar
from .model import Member


@dataclass(frozen=True)
class DashboardStats:
    total_members: int
    active_members: int
    pending_members: int
    inactive_members: int
    instructors: int
    checked_in_today: int
    weekly_check_ins: int
    upcoming_birthdays: int

    def to_dict(self) -> dict:
        return {
            "totalMembers": self.total_members,
            "activeMembers": self.active_members,
            "pendingMembers": self.pending_members,
            "inactiveMembers": self.inactive_members,
            "instructors": self.instructors,
            "checkedInToday": self.checked_in_today,
            "weeklyCheckIns": self.weekly_check_ins,
            "upcomingBirthdays": self.upcoming_birthdays,
        }


class DashboardService:
    """Gym-wide counters for the reception dashboard."""

    def __init__(
        self,
        clock: Clock,
        *,
        birthdays: BirthdayCalendar | None = None,
        week_reset_hour: int = DEFAULT_WEEK_RESET_HOUR,
        birthday_lookahead_days: int = DEFAULT_BIRTHDAY_LOOKAHEAD_DAYS,
    ):
        self._clock = clock
        self._birthdays = birthdays or BirthdayCalendar(clock)
        self._week_reset_hour = int(week_reset_hour)
        self._lookahead = int(birthday_lookahead_days)

    def compute(self, members: Sequence[Member], records: Sequence[CheckInRecord]) -> DashboardStats:
        now = self._clock.now()
        tz = self._clock.tz

        def count_status(status: MemberStatus) -> int:
            return sum(1 for m in members if m.status == status.value)

        return DashboardStats(
            total_members=len(members),
            active_members=count_status(MemberStatus.ACTIVE),
            pending_members=count_status(MemberStatus.PENDING),
            inactive_members=count_status(MemberStatus.INACTIVE),
            instructors=sum(1 for m in members if m.role == "instructor"),
            checked_in_today=sum(1 for r in records if to_local(r.check_in_time, tz).date() == now.date()),
            weekly_check_ins=len(records_since(records, week_reset_start(now, reset_hour=self._week_reset_hour))),
            upcoming_birthdays=len(self._birthdays.upcoming(members, self._lookahead)),
        )

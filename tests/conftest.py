from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from gym_attendance.checkins.model import CheckInRecord
from gym_attendance.common.datetime_utils import FixedClock
from gym_attendance.core.enums import CheckInStatus
from gym_attendance.members.model import Member


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    # Tuesday
    return utc(2025, 6, 10, 10, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def make_record():
    counter = {"n": 0}

    def _make(
        check_in_time: datetime,
        *,
        member_id: str = "m1",
        member_name: str = "Thor Hammer",
        membership_type: str = "Monthly Unlimited",
        status: CheckInStatus = CheckInStatus.COMPLETED,
        check_out_time: datetime | None = None,
    ) -> CheckInRecord:
        counter["n"] += 1
        return CheckInRecord(
            id=f"c{counter['n']}",
            member_id=member_id,
            member_name=member_name,
            membership_type=membership_type,
            status=status,
            check_in_time=check_in_time,
            check_out_time=check_out_time,
        )

    return _make


@pytest.fixture
def make_member():
    def _make(member_id: str, *, dob: date | None = None, status: str = "active", role: str = "member", **kw) -> Member:
        return Member(
            id=member_id,
            first_name=kw.pop("first_name", "Member"),
            last_name=kw.pop("last_name", member_id.upper()),
            email=kw.pop("email", f"{member_id}@gym.test"),
            membership_type=kw.pop("membership_type", "Monthly"),
            status=status,
            date_of_birth=dob,
            role=role,
            **kw,
        )

    return _make

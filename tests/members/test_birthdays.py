from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from gym_attendance.common.datetime_utils import FixedClock, occurrence_in_year
from gym_attendance.core.exceptions import ValidationError
from gym_attendance.members.birthdays import BirthdayCalendar
from gym_attendance.members.model import Member


@pytest.fixture
def calendar(clock) -> BirthdayCalendar:
    return BirthdayCalendar(clock)


def test_upcoming_is_today_through_next_seven_days(calendar, make_member):
    members = [
        make_member("today", dob=date(1990, 6, 10)),
        make_member("in7", dob=date(1990, 6, 17)),
        make_member("in8", dob=date(1990, 6, 18)),
        make_member("yesterday", dob=date(1990, 6, 9)),
        make_member("unknown"),
    ]

    assert [m.id for m in calendar.upcoming(members)] == ["today", "in7"]
    assert [m.id for m in calendar.upcoming(members, within_days=8)] == ["today", "in7", "in8"]


def test_entries_roll_past_birthdays_into_next_year(calendar, make_member):
    members = [
        make_member("passed", dob=date(1990, 6, 9)),
        make_member("tomorrow", dob=date(1990, 6, 11)),
        make_member("today", dob=date(1995, 6, 10)),
    ]

    entries = calendar.entries(members, within_days=400)

    assert [e.member.id for e in entries] == ["today", "tomorrow", "passed"]
    today, tomorrow, passed = entries
    assert today.is_today and today.label == "Today!" and today.age == 30
    assert tomorrow.label == "Tomorrow" and tomorrow.this_week
    assert passed.next_birthday == date(2026, 6, 9)
    assert passed.days_until == 364
    assert passed.age == 36
    assert not passed.this_month
    assert passed.label == "In 364 days"


def test_entries_default_to_next_thirty_days(calendar, make_member):
    members = [make_member("soon", dob=date(2001, 7, 1)), make_member("later", dob=date(2001, 8, 1))]

    assert [e.member.id for e in calendar.entries(members)] == ["soon"]


def test_leap_day_birthday_falls_on_march_first_in_common_years():
    assert occurrence_in_year(date(2000, 2, 29), 2025) == date(2025, 3, 1)
    assert occurrence_in_year(date(2000, 2, 29), 2024) == date(2024, 2, 29)


def test_leap_day_member_is_upcoming_at_end_of_february(make_member):
    calendar = BirthdayCalendar(FixedClock(datetime(2025, 2, 26, 9, 0, tzinfo=timezone.utc)))

    assert [m.id for m in calendar.upcoming([make_member("leap", dob=date(2000, 2, 29))])] == ["leap"]


def test_member_from_dict():
    m = Member.from_dict(
        {
            "id": 7,
            "firstName": "Sarah",
            "lastName": "Johnson",
            "email": "sarah.johnson@email.com",
            "dateOfBirth": "1990-10-08",
            "joinDate": "2023-01-15",
            "lastCheckIn": "2025-06-09T18:00:00Z",
            "membershipType": "Viking Warrior Pro",
        }
    )

    assert m.id == "7"
    assert m.full_name == "Sarah Johnson"
    assert m.date_of_birth == date(1990, 10, 8)
    assert m.join_date == date(2023, 1, 15)
    assert m.last_check_in == datetime(2025, 6, 9, 18, 0, tzinfo=timezone.utc)


def test_member_from_dict_rejects_bad_birth_date():
    with pytest.raises(ValidationError):
        Member.from_dict({"id": "1", "dateOfBirth": "someday"})

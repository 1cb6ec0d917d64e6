from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from gym_attendance.activities.display import (
    ACTIVITY_BADGES,
    badge_for,
    checkin_activity,
    member_added_activity,
    membership_changed_activity,
    to_ui,
)
from gym_attendance.activities.feed import ActivityFeedAggregator
from gym_attendance.activities.model import BirthdayReminder, LoggedActivity
from gym_attendance.core.enums import ActivityType
from gym_attendance.core.exceptions import ValidationError


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def logged(aid: str, at: datetime, kind: ActivityType = ActivityType.CHECKIN) -> LoggedActivity:
    return LoggedActivity(id=aid, type=kind, message=f"{aid} happened", timestamp=at)


@pytest.fixture
def feed(clock) -> ActivityFeedAggregator:
    return ActivityFeedAggregator(clock, max_items=20, page_size=10)


@pytest.fixture
def busy_day(fixed_now, make_member):
    activities = [logged(f"a{i:02d}", fixed_now - timedelta(hours=i)) for i in range(25)]
    members = [
        make_member("b1", dob=date(1990, 6, 12)),
        make_member("b2", dob=date(1985, 1, 5)),
        make_member("b3", dob=date(2000, 12, 25)),
        make_member("nobday"),
    ]
    return activities, members


def test_feed_is_capped_then_paged(feed, busy_day):
    activities, members = busy_day

    first = feed.build_feed(activities, members, page=1)
    second = feed.build_feed(activities, members, page=2)
    third = feed.build_feed(activities, members, page=3)

    assert first.total_pages == 2
    assert len(first.items) == 10 and len(second.items) == 10
    # future reminders lead the feed
    assert [i.id for i in first.items[:3]] == ["bday_b3_2025-12-25", "bday_b1_2025-06-12", "a00"]
    assert third.items == () and third.total_pages == 2


def test_pages_concatenate_to_merged_feed(feed, busy_day):
    activities, members = busy_day

    merged = feed.merged(activities, members)
    pages = feed.pages(activities, members)
    flattened = [i.id for p in pages for i in p.items]

    assert len(merged) == 20
    assert flattened == [i.id for i in merged]
    assert len(set(flattened)) == len(flattened)
    # January reminder is older than everything that survived the cap
    assert "bday_b2_2025-01-05" not in flattened


def test_feed_is_newest_first(feed, busy_day):
    activities, members = busy_day

    stamps = [i.timestamp for i in feed.merged(activities, members)]

    assert stamps == sorted(stamps, reverse=True)


def test_equal_timestamps_are_ordered_by_id(feed, fixed_now):
    activities = [logged("zz", fixed_now), logged("aa", fixed_now), logged("mm", fixed_now)]

    assert [i.id for i in feed.merged(activities, [])] == ["aa", "mm", "zz"]


def test_reminder_sits_at_local_midnight_of_this_years_birthday(feed, make_member):
    (reminder,) = feed.birthday_reminders([make_member("m9", dob=date(1970, 3, 4), first_name="Freya", last_name="Shield")])

    assert isinstance(reminder, BirthdayReminder)
    assert reminder.id == "bday_m9_2025-03-04"
    assert reminder.type == ActivityType.BIRTHDAY_UPCOMING
    assert reminder.message == "Freya Shield birthday upcoming"
    assert reminder.timestamp == utc(2025, 3, 4, 0, 0)
    assert reminder.to_dict()["timestamp"] == "2025-03-04T00:00:00.000Z"


def test_reminder_ids_are_stable(feed, busy_day):
    activities, members = busy_day

    assert feed.merged(activities, members) == feed.merged(activities, members)


@pytest.mark.parametrize("page", [0, -1])
def test_page_before_first_is_empty(feed, busy_day, page):
    activities, members = busy_day

    out = feed.build_feed(activities, members, page=page)

    assert out.items == ()
    assert out.total_pages == 2


def test_page_size_override(feed, busy_day):
    activities, members = busy_day

    out = feed.build_feed(activities, members, page=4, page_size=5)

    assert out.total_pages == 4
    assert len(out.items) == 5


def test_empty_feed_has_no_pages(feed):
    out = feed.build_feed([], [], page=1)

    assert out.to_dict() == {"items": [], "page": 1, "totalPages": 0}


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_page_size_is_rejected(clock, feed, size):
    with pytest.raises(ValidationError):
        feed.build_feed([], [], page_size=size)
    with pytest.raises(ValidationError):
        ActivityFeedAggregator(clock, page_size=size)


def test_birthday_reminders_cannot_be_logged(fixed_now):
    with pytest.raises(ValidationError):
        logged("x", fixed_now, ActivityType.BIRTHDAY_UPCOMING)


def test_logged_activity_from_dict():
    a = LoggedActivity.from_dict(
        {
            "id": "act1",
            "type": "membership_changed",
            "message": "Thor Hammer membership changed to Annual",
            "timestamp": "2025-06-10T09:00:00Z",
            "memberId": "42",
            "updatedBy": {"name": "Admin", "role": "admin"},
        }
    )

    assert a.type == ActivityType.MEMBERSHIP_CHANGED
    assert a.timestamp == utc(2025, 6, 10, 9, 0)
    assert a.to_dict()["updatedBy"] == {"name": "Admin", "role": "admin"}


@pytest.mark.parametrize(
    "data",
    [
        {"id": "1", "type": "party", "timestamp": "2025-06-10T09:00:00Z"},
        {"id": "1", "type": "checkin", "timestamp": "noon"},
        {"id": "1", "type": "checkin", "timestamp": "2025-06-10T09:00:00Z", "updatedBy": "Admin"},
        {"id": "1", "type": "birthday_upcoming", "timestamp": "2025-06-10T09:00:00Z"},
        {"type": "checkin", "timestamp": "2025-06-10T09:00:00Z"},
    ],
)
def test_logged_activity_from_dict_rejects_bad_entries(data):
    with pytest.raises(ValidationError):
        LoggedActivity.from_dict(data)


def test_every_activity_type_has_a_badge(fixed_now):
    assert set(ACTIVITY_BADGES) == set(ActivityType)

    row = to_ui(logged("a1", fixed_now))
    assert row["icon"] == badge_for(logged("a1", fixed_now)).icon
    assert row["css_class"] == "success"


def test_activity_builders(make_record, make_member, fixed_now):
    rec = make_record(fixed_now, member_name="Thor Hammer", member_id="42")
    member = make_member("7", first_name="Sarah", last_name="Johnson", membership_type="Annual")

    checkin = checkin_activity(rec)
    assert checkin.type == ActivityType.CHECKIN
    assert checkin.message == "Thor Hammer checked in"
    assert checkin.member_id == "42"
    assert checkin.metadata == {"checkInId": rec.id}

    assert member_added_activity(member).message == "New member: Sarah Johnson"
    assert membership_changed_activity(member).to_dict() == {
        "type": "membership_changed",
        "message": "Sarah Johnson membership changed to Annual",
        "memberId": "7",
        "metadata": None,
    }

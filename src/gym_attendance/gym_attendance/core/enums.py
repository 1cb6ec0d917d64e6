from __future__ import annotations

from enum import Enum


class CheckInStatus(str, Enum):
    """Visit state as stored by the check-in desk."""

    ACTIVE = "active"
    COMPLETED = "completed"


class MemberStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    INACTIVE = "inactive"


class TimeWindow(str, Enum):
    """Named ranges accepted by the check-in history filter."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"


class ActivityType(str, Enum):
    CHECKIN = "checkin"
    MEMBER_ADDED = "member_added"
    MEMBER_UPDATED = "member_updated"
    MEMBERSHIP_CHANGED = "membership_changed"
    ANNOUNCEMENT_CREATED = "announcement_created"
    ANNOUNCEMENT_PUBLISHED = "announcement_published"
    ANNOUNCEMENT_DELETED = "announcement_deleted"
    BIRTHDAY_UPCOMING = "birthday_upcoming"

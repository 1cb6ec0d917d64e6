from __future__ import annotations

from dataclasses import dataclass

from ..checkins.model import CheckInRecord
from ..core.enums import ActivityType
from ..members.model import Member
from .model import FeedItem, NewActivity


@dataclass(frozen=True)
class ActivityBadge:
    icon: str
    css_class: str


ACTIVITY_BADGES: dict[ActivityType, ActivityBadge] = {
    ActivityType.CHECKIN: ActivityBadge("✅", "success"),
    ActivityType.MEMBER_ADDED: ActivityBadge("\U0001F464", "info"),
    ActivityType.MEMBER_UPDATED: ActivityBadge("\U0001F6E0️", "info"),
    ActivityType.MEMBERSHIP_CHANGED: ActivityBadge("\U0001F4B3", "warning"),
    ActivityType.ANNOUNCEMENT_CREATED: ActivityBadge("\U0001F4DD", "info"),
    ActivityType.ANNOUNCEMENT_PUBLISHED: ActivityBadge("\U0001F4E2", "success"),
    ActivityType.ANNOUNCEMENT_DELETED: ActivityBadge("\U0001F5D1️", "warning"),
    ActivityType.BIRTHDAY_UPCOMING: ActivityBadge("\U0001F382", "birthday"),
}


def badge_for(item: FeedItem) -> ActivityBadge:
    return ACTIVITY_BADGES[item.type]


def to_ui(item: FeedItem) -> dict:
    badge = badge_for(item)
    row = item.to_dict()
    row["icon"] = badge.icon
    row["css_class"] = badge.css_class
    return row


# Log entries the desk and the member directory append when something happens.

def checkin_activity(record: CheckInRecord) -> NewActivity:
    return NewActivity(
        type=ActivityType.CHECKIN,
        message=f"{record.member_name} checked in",
        member_id=record.member_id,
        metadata={"checkInId": record.id},
    )


def member_added_activity(member: Member) -> NewActivity:
    return NewActivity(
        type=ActivityType.MEMBER_ADDED,
        message=f"New member: {member.first_name} {member.last_name}",
        member_id=member.id,
    )


def member_updated_activity(member: Member) -> NewActivity:
    return NewActivity(
        type=ActivityType.MEMBER_UPDATED,
        message=f"{member.full_name} profile updated",
        member_id=member.id,
    )


def membership_changed_activity(member: Member) -> NewActivity:
    return NewActivity(
        type=ActivityType.MEMBERSHIP_CHANGED,
        message=f"{member.full_name} membership changed to {member.membership_type}",
        member_id=member.id,
    )

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, ClassVar, Mapping, Optional, Union

from ..common.datetime_utils import parse_iso_datetime, to_iso
from ..common.validators import require_fields
from ..core.enums import ActivityType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class UpdatedBy:
    name: str
    role: str


@dataclass(frozen=True)
class LoggedActivity:
    """Domain entity: an entry of the persisted activity log."""

    id: str
    type: ActivityType
    message: str
    timestamp: datetime
    member_id: Optional[str] = None
    updated_by: Optional[UpdatedBy] = None
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if self.type == ActivityType.BIRTHDAY_UPCOMING:
            raise ValidationError("birthday reminders are computed, not logged")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggedActivity":
        require_fields(data, ("id", "type", "timestamp"))
        try:
            kind = ActivityType(data["type"])
        except ValueError:
            raise ValidationError(f"Unknown activity type: {data['type']!r}")
        raw_ts = data["timestamp"]
        try:
            timestamp = raw_ts if isinstance(raw_ts, datetime) else parse_iso_datetime(str(raw_ts))
        except ValueError:
            raise ValidationError(f"timestamp is not valid: {raw_ts!r}")
        by = data.get("updatedBy")
        if by and not isinstance(by, Mapping):
            raise ValidationError("updatedBy must be an object")
        return cls(
            id=str(data["id"]),
            type=kind,
            message=str(data.get("message") or ""),
            timestamp=timestamp,
            member_id=str(data["memberId"]) if data.get("memberId") else None,
            updated_by=UpdatedBy(name=str(by.get("name", "")), role=str(by.get("role", ""))) if by else None,
            metadata=dict(data.get("metadata") or {}),
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "type": self.type.value,
            "message": self.message,
            "timestamp": to_iso(self.timestamp),
            "memberId": self.member_id,
        }
        if self.updated_by:
            out["updatedBy"] = {"name": self.updated_by.name, "role": self.updated_by.role}
        return out


@dataclass(frozen=True)
class BirthdayReminder:
    """Computed on read from the member directory, never stored."""

    type: ClassVar[ActivityType] = ActivityType.BIRTHDAY_UPCOMING

    member_id: str
    occurrence: date
    message: str
    timestamp: datetime

    @property
    def id(self) -> str:
        return f"bday_{self.member_id}_{self.occurrence.isoformat()}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "message": self.message,
            "timestamp": to_iso(self.timestamp),
            "memberId": self.member_id,
        }


FeedItem = Union[LoggedActivity, BirthdayReminder]


@dataclass(frozen=True)
class NewActivity:
    """Activity the caller should append to the log (id and timestamp assigned on insert)."""

    type: ActivityType
    message: str
    member_id: Optional[str] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "message": self.message,
            "memberId": self.member_id,
            "metadata": dict(self.metadata) or None,
        }


@dataclass(frozen=True)
class FeedPage:
    items: tuple[FeedItem, ...]
    page: int
    total_pages: int

    def to_dict(self) -> dict:
        return {
            "items": [i.to_dict() for i in self.items],
            "page": self.page,
            "totalPages": self.total_pages,
        }

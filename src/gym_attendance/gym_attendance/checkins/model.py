from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_datetime, to_iso, to_local
from ..common.validators import require_fields
from ..core.enums import CheckInStatus
from ..core.exceptions import ValidationError


def _as_datetime(value: Any, field_name: str) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return parse_iso_datetime(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid timestamp")


@dataclass(frozen=True)
class CheckInRecord:
    """Domain entity: one visit of a member to the gym."""

    id: str
    member_id: str
    member_name: str
    membership_type: str
    status: CheckInStatus
    check_in_time: datetime
    check_out_time: Optional[datetime] = None
    role: str = "member"
    phone: str = ""

    def _bounds(self) -> tuple[datetime, datetime]:
        # a naive side is read in the zone of the aware side
        start, end = self.check_in_time, self.check_out_time
        if start.tzinfo is None and end.tzinfo is not None:
            start = to_local(start, end.tzinfo)
        elif end.tzinfo is None and start.tzinfo is not None:
            end = to_local(end, start.tzinfo)
        return start, end

    def __post_init__(self):
        if self.check_out_time is None:
            return
        start, end = self._bounds()
        if end < start:
            raise ValidationError("Check-out time cannot be earlier than check-in time")

    @property
    def in_progress(self) -> bool:
        return self.status == CheckInStatus.ACTIVE and self.check_out_time is None

    @property
    def duration_minutes(self) -> Optional[int]:
        if self.check_out_time is None:
            return None
        start, end = self._bounds()
        return int((end - start).total_seconds() // 60)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckInRecord":
        """Build from the camelCase shape the check-in desk stores."""
        require_fields(data, ("id", "memberId", "checkInTime"))
        check_out = data.get("checkOutTime")
        try:
            status = CheckInStatus(data.get("status") or CheckInStatus.ACTIVE.value)
        except ValueError:
            raise ValidationError(f"Unknown check-in status: {data.get('status')!r}")
        return cls(
            id=str(data["id"]),
            member_id=str(data["memberId"]),
            member_name=str(data.get("memberName") or ""),
            membership_type=str(data.get("membershipType") or ""),
            status=status,
            check_in_time=_as_datetime(data["checkInTime"], "checkInTime"),
            check_out_time=_as_datetime(check_out, "checkOutTime") if check_out else None,
            role=str(data.get("role") or "member"),
            phone=str(data.get("phone") or ""),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "memberId": self.member_id,
            "memberName": self.member_name,
            "membershipType": self.membership_type,
            "role": self.role,
            "status": self.status.value,
            "checkInTime": to_iso(self.check_in_time),
            "checkOutTime": to_iso(self.check_out_time) if self.check_out_time else None,
            "phone": self.phone,
        }

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..checkins.model import CheckInRecord
from ..common.datetime_utils import coerce_date, parse_iso_datetime
from ..common.validators import require_fields
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Member:
    """Domain entity: Member, as handed over by the member directory.

    Note: read-only here; the directory owns creation and updates.
    """

    id: str
    first_name: str
    last_name: str
    email: str = ""
    phone: str = ""
    membership_type: str = ""
    status: str = "active"
    join_date: Optional[date] = None
    date_of_birth: Optional[date] = None
    last_check_in: Optional[datetime] = None
    role: str = "member"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Member":
        require_fields(data, ("id",))
        raw_dob = data.get("dateOfBirth")
        dob = coerce_date(raw_dob)
        if raw_dob and dob is None:
            raise ValidationError(f"dateOfBirth is not a valid date: {raw_dob!r}")
        last = data.get("lastCheckIn")
        last_check_in: Optional[datetime] = None
        if isinstance(last, datetime):
            last_check_in = last
        elif last:
            try:
                last_check_in = parse_iso_datetime(str(last))
            except ValueError:
                raise ValidationError(f"lastCheckIn is not a valid timestamp: {last!r}")
        return cls(
            id=str(data["id"]),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            email=str(data.get("email") or ""),
            phone=str(data.get("phone") or ""),
            membership_type=str(data.get("membershipType") or ""),
            status=str(data.get("status") or "active"),
            join_date=coerce_date(data.get("joinDate")),
            date_of_birth=dob,
            last_check_in=last_check_in,
            role=str(data.get("role") or "member"),
        )


@dataclass(frozen=True)
class MemberStats:
    """Visit counts for one member; ``history`` is most recent first."""

    member_id: str
    today: int = 0
    week: int = 0
    month: int = 0
    year: int = 0
    all_time: int = 0
    history: tuple[CheckInRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "memberId": self.member_id,
            "today": self.today,
            "week": self.week,
            "month": self.month,
            "year": self.year,
            "allTime": self.all_time,
            "history": [r.to_dict() for r in self.history],
        }

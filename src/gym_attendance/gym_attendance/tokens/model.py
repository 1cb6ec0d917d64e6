from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_datetime, to_iso
from ..common.validators import require_fields
from ..core.exceptions import TokenFormatError

REQUIRED_PAYLOAD_FIELDS = ("email", "membershipType", "checkInId", "timestamp", "expiresAt")


@dataclass(frozen=True)
class CheckInToken:
    """Decoded check-in claim read from a member's QR code (not yet validated)."""

    email: str
    membership_type: str
    check_in_id: str
    issued_at: datetime
    expires_at: datetime
    user_id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "CheckInToken":
        """Build from the JSON wire shape; raises TokenFormatError on any shape problem."""
        data = require_fields(payload, REQUIRED_PAYLOAD_FIELDS, error=TokenFormatError)
        for name in REQUIRED_PAYLOAD_FIELDS:
            if not isinstance(data[name], str):
                raise TokenFormatError(f"{name} must be a string")
        try:
            issued_at = parse_iso_datetime(data["timestamp"])
            expires_at = parse_iso_datetime(data["expiresAt"])
        except ValueError as e:
            raise TokenFormatError(f"bad timestamp: {e}")
        user_id = data.get("userId")
        return cls(
            email=data["email"],
            membership_type=data["membershipType"],
            check_in_id=data["checkInId"],
            issued_at=issued_at,
            expires_at=expires_at,
            user_id=str(user_id) if user_id not in (None, "") else None,
        )

    def to_payload(self) -> dict:
        payload = {
            "email": self.email,
            "membershipType": self.membership_type,
            "checkInId": self.check_in_id,
            "timestamp": to_iso(self.issued_at),
            "expiresAt": to_iso(self.expires_at),
        }
        if self.user_id:
            payload["userId"] = self.user_id
        return payload


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None
    payload: Optional[CheckInToken] = None
    user_data: Optional[dict] = None

    @classmethod
    def ok(cls, token: CheckInToken, raw: Optional[Mapping[str, Any]] = None) -> "ValidationResult":
        return cls(valid=True, payload=token, user_data=dict(raw) if raw is not None else token.to_payload())

    @classmethod
    def rejected(cls, reason: str) -> "ValidationResult":
        return cls(valid=False, reason=reason)

    def to_dict(self) -> dict:
        out: dict = {"isValid": self.valid}
        if self.valid and self.payload is not None:
            out["userData"] = self.user_data or self.payload.to_payload()
        if self.reason:
            out["reason"] = self.reason
        return out

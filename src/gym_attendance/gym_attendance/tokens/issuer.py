from __future__ import annotations

import secrets
import string
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import Clock
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_CHECKIN_ID_PREFIX, DEFAULT_QR_TOKEN_TTL_HOURS
from ..members.model import Member
from .model import CheckInToken

_BASE36 = string.digits + string.ascii_uppercase


def generate_check_in_id(email: str, *, at: datetime, prefix: str = DEFAULT_CHECKIN_ID_PREFIX, suffix: Optional[str] = None) -> str:
    """Human-readable check-in id, e.g. ``VH-JO-123456-X7Q``.

    Parts: gym prefix, first two letters of the email, last six digits of the
    issue time in epoch milliseconds, three random base-36 characters.
    """
    millis = str(int(at.timestamp() * 1000))[-6:]
    tail = suffix if suffix is not None else "".join(secrets.choice(_BASE36) for _ in range(3))
    return f"{prefix}-{email[:2].upper()}-{millis}-{tail}"


class TokenIssuer:
    """Mints the check-in token a member shows at the desk."""

    def __init__(self, clock: Clock, *, ttl_hours: int = DEFAULT_QR_TOKEN_TTL_HOURS, prefix: str = DEFAULT_CHECKIN_ID_PREFIX):
        self._clock = clock
        self._ttl = timedelta(hours=int(ttl_hours))
        self._prefix = prefix

    def issue_for(self, *, email: str, membership_type: str, user_id: Optional[str] = None) -> CheckInToken:
        email = require_non_empty(email, "Email")
        membership_type = require_non_empty(membership_type, "Membership type")
        now = self._clock.now()
        return CheckInToken(
            email=email,
            membership_type=membership_type,
            check_in_id=generate_check_in_id(email, at=now, prefix=self._prefix),
            issued_at=now,
            expires_at=now + self._ttl,
            user_id=user_id,
        )

    def issue(self, member: Member) -> CheckInToken:
        return self.issue_for(email=member.email, membership_type=member.membership_type, user_id=member.id)

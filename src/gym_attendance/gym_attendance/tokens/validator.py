from __future__ import annotations

import json
from typing import Any

from ..common.datetime_utils import Clock, to_local
from ..common.logging import get_logger
from ..core.constants import REASON_EXPIRED, REASON_INVALID_FORMAT
from ..core.exceptions import TokenExpiredError, TokenFormatError
from .model import CheckInToken, ValidationResult

logger = get_logger(__name__)


class TokenValidator:
    """Decides whether a decoded check-in token may be admitted at the desk.

    Rules are applied in order: shape first (every wire field present, both
    timestamps parseable), then expiry. A token whose ``expiresAt`` equals
    the current instant is still valid. Problems are reported through
    ``ValidationResult.reason``; nothing is raised to the caller.
    """

    def __init__(self, clock: Clock):
        self._clock = clock

    def check(self, payload: Any) -> CheckInToken:
        """Strict variant of ``validate``: raises TokenFormatError / TokenExpiredError."""
        token = CheckInToken.from_payload(payload)
        now = self._clock.now()
        if now > to_local(token.expires_at, self._clock.tz):
            raise TokenExpiredError(f"token {token.check_in_id} expired at {token.expires_at.isoformat()}")
        return token

    def validate(self, payload: Any) -> ValidationResult:
        try:
            token = self.check(payload)
        except TokenFormatError as e:
            logger.info("check-in token rejected: %s", e)
            return ValidationResult.rejected(REASON_INVALID_FORMAT)
        except TokenExpiredError as e:
            logger.info("check-in token rejected: %s", e)
            return ValidationResult.rejected(REASON_EXPIRED)
        return ValidationResult.ok(token, payload)

    def validate_text(self, raw: str) -> ValidationResult:
        """Validate the JSON text scanned from a QR code."""
        if not raw or not str(raw).strip():
            return ValidationResult.rejected(REASON_INVALID_FORMAT)
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError):
            logger.info("check-in token rejected: payload is not JSON")
            return ValidationResult.rejected(REASON_INVALID_FORMAT)
        return self.validate(payload)

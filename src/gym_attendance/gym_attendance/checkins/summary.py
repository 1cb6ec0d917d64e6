from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Sequence

from ..common.datetime_utils import Clock, to_local
from ..core.constants import DEFAULT_ACTIVE_WINDOW_MINUTES
from ..core.enums import CheckInStatus
from .model import CheckInRecord


@dataclass(frozen=True)
class CheckInSummary:
    """Headline numbers shown above the check-in history table."""

    total: int
    today: int
    active: int
    avg_duration_minutes: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "today": self.today,
            "active": self.active,
            "avgDuration": self.avg_duration_minutes,
        }


class CheckInSummaryService:
    def __init__(self, clock: Clock, *, active_window_minutes: int = DEFAULT_ACTIVE_WINDOW_MINUTES):
        self._clock = clock
        self._active_window = timedelta(minutes=int(active_window_minutes))

    def summarize(self, records: Sequence[CheckInRecord]) -> CheckInSummary:
        now = self._clock.now()
        tz = self._clock.tz
        active_since = now - self._active_window

        today = 0
        active = 0
        durations: list[int] = []
        for r in records:
            checked_in = to_local(r.check_in_time, tz)
            if checked_in.date() == now.date():
                today += 1
            # only recent open visits count as "in the gym"
            if r.status == CheckInStatus.ACTIVE and checked_in >= active_since:
                active += 1
            if r.duration_minutes:
                durations.append(r.duration_minutes)

        avg = math.floor(sum(durations) / len(durations) + 0.5) if durations else 0
        return CheckInSummary(total=len(records), today=today, active=active, avg_duration_minutes=avg)

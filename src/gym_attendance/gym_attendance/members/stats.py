from __future__ import annotations

from typing import Iterable

from ..checkins.filters import records_since
from ..checkins.model import CheckInRecord
from ..common.datetime_utils import Clock, month_start, to_local, today_start, week_reset_start, year_start
from ..common.logging import get_logger
from ..core.constants import DEFAULT_WEEK_RESET_HOUR
from .model import MemberStats

logger = get_logger(__name__)


class MemberStatsCalculator:
    """Per-member visit counters.

    ``week`` follows the membership week, which resets every Monday at
    ``week_reset_hour`` local time. This is deliberately not the rolling
    7-day window used by the history filter.
    """

    def __init__(self, clock: Clock, *, week_reset_hour: int = DEFAULT_WEEK_RESET_HOUR):
        self._clock = clock
        self._week_reset_hour = int(week_reset_hour)

    def compute_stats(self, records: Iterable[CheckInRecord], member_id: str) -> MemberStats:
        now = self._clock.now()
        target = str(member_id)
        mine = [r for r in records if r.member_id == target]
        if not mine:
            logger.debug("no check-ins for member %s", target)
            return MemberStats(member_id=target)

        tz = self._clock.tz
        history = tuple(sorted(mine, key=lambda r: to_local(r.check_in_time, tz), reverse=True))
        return MemberStats(
            member_id=target,
            today=len(records_since(mine, today_start(self._clock))),
            week=len(records_since(mine, week_reset_start(now, reset_hour=self._week_reset_hour))),
            month=len(records_since(mine, month_start(now))),
            year=len(records_since(mine, year_start(now))),
            all_time=len(mine),
            history=history,
        )

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import Clock, coerce_date, end_of_day, start_of_day, to_local, today_start
from ..common.logging import get_logger
from ..core.constants import MONTH_WINDOW_DAYS, WEEK_WINDOW_DAYS, YEAR_WINDOW_DAYS
from ..core.enums import CheckInStatus, TimeWindow
from .model import CheckInRecord

logger = get_logger(__name__)

_ROLLING_DAYS = {
    TimeWindow.TODAY: 0,
    TimeWindow.WEEK: WEEK_WINDOW_DAYS,
    TimeWindow.MONTH: MONTH_WINDOW_DAYS,
    TimeWindow.YEAR: YEAR_WINDOW_DAYS,
}

_ALL = "all"


def _parse_window(window) -> Optional[TimeWindow]:
    if isinstance(window, TimeWindow):
        return window
    try:
        return TimeWindow(str(window).strip().lower())
    except ValueError:
        return None


class TimeWindowFilter:
    """Check-in history filter: a time window ANDed with optional criteria.

    Windows are counted in calendar days back from the start of today, so
    ``week`` is the last 7 days plus today, not the membership week (see
    ``MemberStatsCalculator``). An unknown window, or ``custom`` without both
    bounds, leaves the time dimension unfiltered.
    """

    def __init__(self, clock: Clock):
        self._clock = clock

    def window_predicate(
        self,
        window,
        *,
        start_date: Optional[date | str] = None,
        end_date: Optional[date | str] = None,
    ) -> Optional[Callable[[CheckInRecord], bool]]:
        """Membership test for ``window``, or None when the window imposes no bound."""
        tz = self._clock.tz
        selected = _parse_window(window)

        if selected in _ROLLING_DAYS:
            since = today_start(self._clock) - timedelta(days=_ROLLING_DAYS[selected])
            return lambda r: to_local(r.check_in_time, tz) >= since

        if selected == TimeWindow.CUSTOM:
            start, end = coerce_date(start_date), coerce_date(end_date)
            if start is None or end is None:
                logger.debug("custom window without both bounds, skipping time filter")
                return None
            lower, upper = start_of_day(start, tz), end_of_day(end, tz)
            return lambda r: lower <= to_local(r.check_in_time, tz) <= upper

        if window is not None:
            logger.debug("unknown time window %r, skipping time filter", window)
        return None

    def apply(
        self,
        records: Iterable[CheckInRecord],
        window=None,
        *,
        start_date: Optional[date | str] = None,
        end_date: Optional[date | str] = None,
        search: Optional[str] = None,
        status: Optional[CheckInStatus | str] = None,
        membership_type: Optional[str] = None,
    ) -> list[CheckInRecord]:
        predicates: list[Callable[[CheckInRecord], bool]] = []

        in_window = self.window_predicate(window, start_date=start_date, end_date=end_date)
        if in_window:
            predicates.append(in_window)

        term = (search or "").strip().lower()
        if term:
            predicates.append(lambda r: term in r.member_name.lower())

        status_value = status.value if isinstance(status, CheckInStatus) else status
        if status_value and status_value != _ALL:
            predicates.append(lambda r: r.status.value == status_value)

        if membership_type and membership_type != _ALL:
            predicates.append(lambda r: r.membership_type == membership_type)

        return [r for r in records if all(p(r) for p in predicates)]


def records_since(records: Sequence[CheckInRecord], since: datetime) -> list[CheckInRecord]:
    """Records whose check-in is at or after ``since`` (compared in ``since``'s zone)."""
    tz = since.tzinfo
    return [r for r in records if to_local(r.check_in_time, tz) >= since]

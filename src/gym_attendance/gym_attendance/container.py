from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .activities.feed import ActivityFeedAggregator
from .checkins.filters import TimeWindowFilter
from .checkins.summary import CheckInSummaryService
from .common.datetime_utils import Clock, SystemClock
from .core import constants
from .members.birthdays import BirthdayCalendar
from .members.dashboard import DashboardService
from .members.stats import MemberStatsCalculator
from .tokens.issuer import TokenIssuer
from .tokens.validator import TokenValidator


@dataclass(frozen=True)
class Container:
    clock: Clock

    token_validator: TokenValidator
    token_issuer: TokenIssuer
    history_filter: TimeWindowFilter
    checkin_summary: CheckInSummaryService
    member_stats: MemberStatsCalculator
    birthdays: BirthdayCalendar
    dashboard: DashboardService
    activity_feed: ActivityFeedAggregator

    birthday_lookahead_days: int

    def reception_feed(self, activities, members, page: int = 1):
        """Feed page as shown at reception: reminders only for birthdays in the next few days."""
        soon = self.birthdays.upcoming(members, self.birthday_lookahead_days)
        return self.activity_feed.build_feed(activities, soon, page=page)


def build_container(*, settings: Optional[ModuleType] = None, clock: Optional[Clock] = None) -> Container:
    """Wire every service from a settings module (see ``config``); missing keys use defaults."""

    def setting(name: str, default):
        return getattr(settings, name, default) if settings is not None else default

    clock = clock or SystemClock.for_zone(setting("TIMEZONE", constants.DEFAULT_TIMEZONE))
    week_reset_hour = int(setting("WEEK_RESET_HOUR", constants.DEFAULT_WEEK_RESET_HOUR))
    lookahead = int(setting("BIRTHDAY_LOOKAHEAD_DAYS", constants.DEFAULT_BIRTHDAY_LOOKAHEAD_DAYS))

    birthdays = BirthdayCalendar(clock)

    return Container(
        clock=clock,
        token_validator=TokenValidator(clock),
        token_issuer=TokenIssuer(
            clock,
            ttl_hours=int(setting("QR_TOKEN_TTL_HOURS", constants.DEFAULT_QR_TOKEN_TTL_HOURS)),
            prefix=str(setting("CHECKIN_ID_PREFIX", constants.DEFAULT_CHECKIN_ID_PREFIX)),
        ),
        history_filter=TimeWindowFilter(clock),
        checkin_summary=CheckInSummaryService(
            clock,
            active_window_minutes=int(setting("ACTIVE_WINDOW_MINUTES", constants.DEFAULT_ACTIVE_WINDOW_MINUTES)),
        ),
        member_stats=MemberStatsCalculator(clock, week_reset_hour=week_reset_hour),
        birthdays=birthdays,
        dashboard=DashboardService(
            clock,
            birthdays=birthdays,
            week_reset_hour=week_reset_hour,
            birthday_lookahead_days=lookahead,
        ),
        activity_feed=ActivityFeedAggregator(
            clock,
            max_items=int(setting("FEED_MAX_ITEMS", constants.DEFAULT_FEED_MAX_ITEMS)),
            page_size=int(setting("FEED_PAGE_SIZE", constants.DEFAULT_FEED_PAGE_SIZE)),
        ),
        birthday_lookahead_days=lookahead,
    )

from __future__ import annotations

import math
from datetime import datetime, time
from typing import Iterable, Sequence

from ..common.datetime_utils import Clock, occurrence_in_year, to_local
from ..common.logging import get_logger
from ..core.constants import DEFAULT_FEED_MAX_ITEMS, DEFAULT_FEED_PAGE_SIZE
from ..core.exceptions import ValidationError
from ..members.model import Member
from .model import BirthdayReminder, FeedItem, FeedPage, LoggedActivity

logger = get_logger(__name__)


class ActivityFeedAggregator:
    """Builds the reception activity feed.

    The feed is the activity log merged with one birthday reminder per member
    that has a birth date, newest first, cut to ``max_items`` and then paged.
    Reminders sit at midnight (local) of this year's birthday. Which members
    get a reminder is up to the caller; pass ``BirthdayCalendar.upcoming(...)``
    to limit it to the next few days.
    """

    def __init__(self, clock: Clock, *, max_items: int = DEFAULT_FEED_MAX_ITEMS, page_size: int = DEFAULT_FEED_PAGE_SIZE):
        if int(page_size) <= 0:
            raise ValidationError("Page size must be positive")
        self._clock = clock
        self._max_items = int(max_items)
        self._page_size = int(page_size)

    def birthday_reminders(self, members: Iterable[Member]) -> list[BirthdayReminder]:
        tz = self._clock.tz
        year = self._clock.now().year
        out = []
        for m in members:
            if m.date_of_birth is None:
                continue
            occurrence = occurrence_in_year(m.date_of_birth, year)
            out.append(
                BirthdayReminder(
                    member_id=m.id,
                    occurrence=occurrence,
                    message=f"{m.first_name} {m.last_name} birthday upcoming",
                    timestamp=datetime.combine(occurrence, time.min, tzinfo=tz),
                )
            )
        return out

    def merged(self, activities: Iterable[LoggedActivity], members: Iterable[Member]) -> list[FeedItem]:
        """Full feed before pagination: sorted newest first and capped."""
        tz = self._clock.tz
        items: list[FeedItem] = [*activities, *self.birthday_reminders(members)]
        # two stable passes: id ascending breaks timestamp ties
        items.sort(key=lambda i: i.id)
        items.sort(key=lambda i: to_local(i.timestamp, tz), reverse=True)
        if len(items) > self._max_items:
            logger.debug("activity feed capped: %d of %d entries kept", self._max_items, len(items))
        return items[: self._max_items]

    def build_feed(
        self,
        activities: Sequence[LoggedActivity],
        members: Sequence[Member],
        page: int = 1,
        page_size: int | None = None,
    ) -> FeedPage:
        size = self._page_size if page_size is None else int(page_size)
        if size <= 0:
            raise ValidationError("Page size must be positive")

        feed = self.merged(activities, members)
        total_pages = math.ceil(len(feed) / size)
        if page < 1:
            return FeedPage(items=(), page=page, total_pages=total_pages)
        items = tuple(feed[(page - 1) * size : page * size])
        return FeedPage(items=items, page=page, total_pages=total_pages)

    def pages(self, activities: Sequence[LoggedActivity], members: Sequence[Member]) -> list[FeedPage]:
        """Every page of the feed, in order."""
        first = self.build_feed(activities, members, page=1)
        return [first] + [self.build_feed(activities, members, page=p) for p in range(2, first.total_pages + 1)]

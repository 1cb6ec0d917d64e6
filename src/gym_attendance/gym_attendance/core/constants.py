"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "UTC"

DEFAULT_QR_TOKEN_TTL_HOURS = 24
DEFAULT_CHECKIN_ID_PREFIX = "VH"

DEFAULT_FEED_MAX_ITEMS = 20
DEFAULT_FEED_PAGE_SIZE = 10

DEFAULT_BIRTHDAY_LOOKAHEAD_DAYS = 7
DEFAULT_BIRTHDAY_LISTING_DAYS = 30

# Membership week resets on Monday at this hour (local time).
DEFAULT_WEEK_RESET_HOUR = 2
DEFAULT_ACTIVE_WINDOW_MINUTES = 90

WEEK_WINDOW_DAYS = 7
MONTH_WINDOW_DAYS = 30
YEAR_WINDOW_DAYS = 365

REASON_INVALID_FORMAT = "Invalid QR code format"
REASON_EXPIRED = "QR code has expired"

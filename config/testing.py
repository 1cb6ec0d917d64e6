TIMEZONE = "UTC"

LOG_LEVEL = "WARNING"

QR_TOKEN_TTL_HOURS = 24
CHECKIN_ID_PREFIX = "VH"

FEED_MAX_ITEMS = 20
FEED_PAGE_SIZE = 10
BIRTHDAY_LOOKAHEAD_DAYS = 7

WEEK_RESET_HOUR = 2
ACTIVE_WINDOW_MINUTES = 90

DEBUG = False
TESTING = True

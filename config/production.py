import os

TIMEZONE = os.getenv("GYM_TIMEZONE", "Asia/Baku")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

QR_TOKEN_TTL_HOURS = int(os.getenv("QR_TOKEN_TTL_HOURS", "24"))
CHECKIN_ID_PREFIX = os.getenv("CHECKIN_ID_PREFIX", "VH")

FEED_MAX_ITEMS = int(os.getenv("FEED_MAX_ITEMS", "20"))
FEED_PAGE_SIZE = int(os.getenv("FEED_PAGE_SIZE", "10"))
BIRTHDAY_LOOKAHEAD_DAYS = int(os.getenv("BIRTHDAY_LOOKAHEAD_DAYS", "7"))

WEEK_RESET_HOUR = int(os.getenv("WEEK_RESET_HOUR", "2"))
ACTIVE_WINDOW_MINUTES = int(os.getenv("ACTIVE_WINDOW_MINUTES", "90"))

DEBUG = False

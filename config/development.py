import os

# IANA zone used for "today", the Monday reset and birthdays
TIMEZONE = os.getenv("GYM_TIMEZONE", "UTC")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Check-in QR tokens
QR_TOKEN_TTL_HOURS = int(os.getenv("QR_TOKEN_TTL_HOURS", "24"))
CHECKIN_ID_PREFIX = os.getenv("CHECKIN_ID_PREFIX", "VH")

# Activity feed
FEED_MAX_ITEMS = int(os.getenv("FEED_MAX_ITEMS", "20"))
FEED_PAGE_SIZE = int(os.getenv("FEED_PAGE_SIZE", "10"))
BIRTHDAY_LOOKAHEAD_DAYS = int(os.getenv("BIRTHDAY_LOOKAHEAD_DAYS", "7"))

# Membership week starts Monday at this hour
WEEK_RESET_HOUR = int(os.getenv("WEEK_RESET_HOUR", "2"))
ACTIVE_WINDOW_MINUTES = int(os.getenv("ACTIVE_WINDOW_MINUTES", "90"))

DEBUG = True

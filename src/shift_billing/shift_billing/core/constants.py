"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

MINUTES_PER_DAY = 24 * 60

DEFAULT_FALLBACK_RATE_CENTS = 2500
DEFAULT_WEEKNIGHT_THRESHOLD = time(19, 0)
DEFAULT_CURRENCY = "AUD"
DEFAULT_MAX_WORKERS = 8

# day_type reported for a weekday shift billed across both flat categories
SPLIT_DAY_TYPE = "weekday/weeknight"

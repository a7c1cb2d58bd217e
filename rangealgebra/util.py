"""Utility constants for rangealgebra.

Domain maximum sentinels are substituted when a range is built without an
upper bound. Time unit constants represent durations in seconds.
"""

import sys
from datetime import date, datetime

# Domain maximum sentinels
MAX_INTEGER = sys.maxsize
MAX_DATE = date(9999, 12, 31)
MAX_DATETIME = datetime(9999, 12, 31, 23, 59, 59)

# Time unit constants (all values in seconds)
MINUTE = 60
HOUR = 3600
DAY = 86400

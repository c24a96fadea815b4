"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

# Classification thresholds (hours). Overridable via settings.
DEFAULT_PRESENT_HOURS = 8.0
DEFAULT_PARTIAL_DAY_HOURS = 6.0

# Expected arrival windows: window start + base spread.
DAY_SHIFT_WINDOW_START = "07:45"
NIGHT_SHIFT_WINDOW_START = "19:45"
ARRIVAL_SPREAD_MINUTES = 30

# Mock data generator defaults.
DEFAULT_MOCK_DAYS = 30
DEFAULT_WEEKEND_DAYS = (4, 5)  # Friday, Saturday (date.weekday())
DEFAULT_ABSENT_RATE = 0.05
DEFAULT_LATE_RATE = 0.10
LATE_EXTRA_MINUTES = (5, 45)
NOMINAL_SHIFT_MINUTES = 8 * 60
SHIFT_LENGTH_JITTER_MINUTES = (-15, 30)

# Raw punch log: punches before noon are logins, at/after noon logouts.
LOGIN_CUTOFF = "12:00"

# Dashboard paging.
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

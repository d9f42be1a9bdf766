"""Constants for StudyWell.

This module centralizes all magic numbers and default values used throughout the application.
"""

from datetime import timedelta


# Civil time: every day boundary is computed in this fixed offset (JST).
CIVIL_UTC_OFFSET = timedelta(hours=9)

# Task defaults and bounds
DEFAULT_IMPORTANCE = 3
MIN_IMPORTANCE = 1
MAX_IMPORTANCE = 5

# Snooze
DEFAULT_SNOOZE_DAYS = 1
MAX_SNOOZE_DAYS = 30

# Health condition scale
CONDITION_BAD = 1
CONDITION_NORMAL = 2
CONDITION_GOOD = 3

# Mood scale
MIN_MOOD = 1
MAX_MOOD = 5

# Scoring coefficients
HEALTH_COEFFICIENTS = {
    CONDITION_GOOD: 1.0,
    CONDITION_NORMAL: 0.9,
    CONDITION_BAD: 0.75,
}
HEALTH_COEFFICIENT_MISSING = 0.9  # No record yet: slightly conservative
DUE_SOON_HOURS = 24
DUE_SOON_COEFFICIENT = 1.2
DUE_UPCOMING_HOURS = 72
DUE_UPCOMING_COEFFICIENT = 1.1

# Dashboard
DASHBOARD_TOP_N = 3

# History
HISTORY_DAYS = 30
MOOD_HISTORY_LIMIT = 100
SUMMARY_WINDOW_DAYS = 7

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Missed-class thresholds of the absence penalty ladder.
WARNING_MISSED_THRESHOLD = 2
EXCLUSION_MISSED_THRESHOLD = 5

PERCENTAGE_MIN = 0
PERCENTAGE_MAX = 100

# Legacy API value meaning "percentage not provided, compute it locally".
PROVIDED_PERCENTAGE_SENTINEL = -1

DEFAULT_ENCOURAGEMENT_MESSAGE = "You are doing well! Keep up the consistency."
DEFAULT_STUDENT_ID = "demo"

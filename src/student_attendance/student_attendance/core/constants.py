"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_STUDENTS = 100
MAX_DAYS = 31

# Roll numbers are stored as signed 32-bit ints.
MAX_ROLL_NUMBER = 2**31 - 1

DEFAULT_MONTH = 5
DEFAULT_DAYS_IN_MONTH = 31

DEFAULT_DATA_FILE = "students.dat"

# Listing colour bands of the roster report (percent).
GOOD_ATTENDANCE_PERCENT = 85.0
WARNING_ATTENDANCE_PERCENT = 75.0

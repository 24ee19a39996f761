"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_SECONDS = 24 * 60 * 60
DEFAULT_PASSWORD_MIN_LENGTH = 4

# Check-in at or after this hour is late.
LATE_CHECKIN_HOUR = 10
# Fewer worked hours than this at checkout is a half day.
HALF_DAY_HOURS = 5

# Key names in the store; shared by the in-process and file-backed backends.
USERS_KEY = "hr_users"
ATTENDANCE_KEY = "hr_attendance"
LEAVES_KEY = "hr_leaves"
PAYROLL_KEY = "hr_payroll"
FILES_KEY = "hr_files"
ANNOUNCEMENTS_KEY = "hr_announcements"

TOKEN_SALT = "hrms-session"

"""Default configuration constants for the Member Attendance Dashboard."""

# Attendance threshold (%): members strictly below it are flagged
DEFAULT_ATTENDANCE_THRESHOLD = 50.0
MIN_ATTENDANCE_THRESHOLD = 0.0
MAX_ATTENDANCE_THRESHOLD = 100.0
THRESHOLD_STEP = 5.0

# Low attendance alert previews
ALERT_MEMBER_PREVIEW_LIMIT = 10   # Members shown before "show all"
MISSED_EVENTS_PREVIEW_SIZE = 3    # Missed events listed per flagged member

# Display rounding for rates (stored rates are never rounded)
RATE_DECIMALS = 1

# Roster view
ROSTER_PAGE_SIZE = 25

# CSV export
EXPORT_COLUMNS = [
    "Member Name",
    "Email",
    "Attendance Rate",
    "Events Attended",
    "Total Events",
]
EXPORT_FILE_NAME = "member_attendance.csv"

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL_ENV_VAR = "DASHBOARD_LOG_LEVEL"

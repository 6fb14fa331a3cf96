"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"
DAILY_KEY_FORMAT = "%m-%d-%Y"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_POOL_SIZE = 5
DEFAULT_REPORT_PERIOD = "day"

USAGE_BANNER = "YouthSync API: Use /attendance (POST), /report (GET), or /export (GET)"

CSV_HEADER = ("Student ID", "Date", "Status")
CSV_FILENAME = "attendance.csv"

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_TIMEOUT_SECONDS = 10.0
DEFAULT_API_BASE_URL = "http://localhost:8080/api"
UNKNOWN_USER_NAME = "Unknown"
WIRE_DATE_FORMAT = "%Y-%m-%d"

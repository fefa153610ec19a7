"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DEPARTMENT = "General"
DEFAULT_EMAIL = ""
EMPLOYEE_ID_PREFIX = "EMP"
DEFAULT_POOL_SIZE = 5
DEFAULT_API_PREFIX = "/api"

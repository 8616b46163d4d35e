"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_LIFETIME_DAYS = 7
TOKEN_ALGORITHM = "HS256"

EMPLOYEE_ID_PATTERN = r"^EMP\d{4}$"
PASSWORD_MIN_LENGTH = 6

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100
MAX_SEARCH_LENGTH = 100

DEFAULT_COUNTRY = "United States"

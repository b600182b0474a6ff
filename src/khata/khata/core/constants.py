"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

STANDARD_WORKDAY_HOURS = Decimal("8")
OVERTIME_MULTIPLIER = Decimal("1.5")
MAX_OVERTIME_HOURS = Decimal("24")

MAX_PHOTO_BYTES = 500 * 1024
MIN_PASSWORD_LENGTH = 6
DEFAULT_MAX_LOGIN_ATTEMPTS = 5
DEFAULT_LOCKOUT_MINUTES = 15
DEFAULT_SESSION_DAYS = 7
DEFAULT_RECENT_ADVANCES = 5

ADMIN_ACCESS_CODE_KEY = "admin_access_code"
CURRENCY_SYMBOL = "₹"

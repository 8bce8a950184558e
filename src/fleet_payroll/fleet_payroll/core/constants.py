"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MINUTES_PER_HOUR = 60
PAY_QUANTUM = Decimal("0.01")

DEFAULT_TIMEZONE = "Europe/London"

# Company default pay rate created at provisioning time.
DEFAULT_BASE_RATE = Decimal("12.00")
DEFAULT_NIGHT_RATE = Decimal("15.00")
DEFAULT_WEEKEND_RATE = Decimal("18.00")
DEFAULT_BANK_HOLIDAY_RATE = Decimal("24.00")
DEFAULT_OVERTIME_MULTIPLIER = Decimal("1.5")
DEFAULT_NIGHT_START_HOUR = 22
DEFAULT_NIGHT_END_HOUR = 6
DEFAULT_DAILY_OVERTIME_THRESHOLD_MINUTES = 480
DEFAULT_WEEKLY_OVERTIME_THRESHOLD_MINUTES = 2400

GOVUK_BANK_HOLIDAYS_URL = "https://www.gov.uk/bank-holidays.json"
GOVUK_DEFAULT_DIVISION = "england-and-wales"
HOLIDAY_CACHE_TTL_SECONDS = 24 * 60 * 60
HOLIDAY_FEED_TIMEOUT_SECONDS = 10

PAYLOAD_SCHEMA_VERSION = 1

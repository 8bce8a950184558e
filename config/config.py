"""Settings shared by every environment; environment modules override them."""

import os

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "fleet_payroll"),
}

# Wall-clock zone used to split shifts into calendar days and night hours.
WAGE_TIMEZONE = os.getenv("WAGE_TIMEZONE", "Europe/London")

GOVUK_BANK_HOLIDAYS_URL = os.getenv("GOVUK_BANK_HOLIDAYS_URL", "https://www.gov.uk/bank-holidays.json")
GOVUK_DIVISION = os.getenv("GOVUK_DIVISION", "england-and-wales")
HOLIDAY_CACHE_TTL_SECONDS = int(os.getenv("HOLIDAY_CACHE_TTL_SECONDS", str(24 * 60 * 60)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEBUG = False
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

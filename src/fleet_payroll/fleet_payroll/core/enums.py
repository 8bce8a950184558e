from __future__ import annotations

from enum import Enum


class WageCategory(str, Enum):
    """Mutually exclusive bucket a worked minute is sorted into."""

    REGULAR = "regular"
    NIGHT = "night"
    WEEKEND = "weekend"
    BANK_HOLIDAY = "bank_holiday"
    OVERTIME = "overtime"


class PayloadType(str, Enum):
    """Tags of the versioned records accepted at the API boundary."""

    PAY_RATE = "pay_rate"
    BANK_HOLIDAY = "bank_holiday"
    SHIFT = "shift"

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.constants import PAY_QUANTUM
from ..core.enums import WageCategory


@dataclass(frozen=True)
class BucketedMinutes:
    """Worked minutes of one shift, split into mutually exclusive buckets."""

    driver_id: int
    shift_id: Optional[int]
    work_date: date
    regular_minutes: int = 0
    night_minutes: int = 0
    weekend_minutes: int = 0
    bank_holiday_minutes: int = 0
    overtime_minutes: int = 0

    @property
    def total_minutes(self) -> int:
        return (
            self.regular_minutes
            + self.night_minutes
            + self.weekend_minutes
            + self.bank_holiday_minutes
            + self.overtime_minutes
        )

    def minutes_for(self, category: WageCategory) -> int:
        return {
            WageCategory.REGULAR: self.regular_minutes,
            WageCategory.NIGHT: self.night_minutes,
            WageCategory.WEEKEND: self.weekend_minutes,
            WageCategory.BANK_HOLIDAY: self.bank_holiday_minutes,
            WageCategory.OVERTIME: self.overtime_minutes,
        }[category]


@dataclass(frozen=True)
class WageBreakdown:
    """Priced shift. Pay components are exact; only total_pay is rounded."""

    driver_id: int
    shift_id: Optional[int]
    rate_id: int
    work_date: date
    regular_minutes: int
    night_minutes: int
    weekend_minutes: int
    bank_holiday_minutes: int
    overtime_minutes: int
    regular_pay: Decimal
    night_pay: Decimal
    weekend_pay: Decimal
    bank_holiday_pay: Decimal
    overtime_pay: Decimal
    total_pay: Decimal

    @property
    def total_minutes(self) -> int:
        return (
            self.regular_minutes
            + self.night_minutes
            + self.weekend_minutes
            + self.bank_holiday_minutes
            + self.overtime_minutes
        )

    def to_dict(self) -> dict:
        def money(value: Decimal) -> str:
            return str(value.quantize(PAY_QUANTUM))

        return {
            "driverId": self.driver_id,
            "shiftId": self.shift_id,
            "payRateId": self.rate_id,
            "workDate": self.work_date.isoformat(),
            "totalMinutes": self.total_minutes,
            "regularMinutes": self.regular_minutes,
            "nightMinutes": self.night_minutes,
            "weekendMinutes": self.weekend_minutes,
            "bankHolidayMinutes": self.bank_holiday_minutes,
            "overtimeMinutes": self.overtime_minutes,
            "regularPay": money(self.regular_pay),
            "nightPay": money(self.night_pay),
            "weekendPay": money(self.weekend_pay),
            "bankHolidayPay": money(self.bank_holiday_pay),
            "overtimePay": money(self.overtime_pay),
            "totalPay": money(self.total_pay),
        }

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PayRate:
    """Domain entity: hourly rates and thresholds for a company or one driver.

    driver_id=None marks the company default.
    """

    rate_id: int
    company_id: int
    driver_id: Optional[int]
    base_rate: Decimal
    night_rate: Decimal
    weekend_rate: Decimal
    bank_holiday_rate: Decimal
    overtime_multiplier: Decimal
    night_start_hour: int
    night_end_hour: int
    daily_overtime_threshold_minutes: int
    weekly_overtime_threshold_minutes: int
    is_active: bool = True
    effective_from: Optional[date] = None
    effective_to: Optional[date] = None

    @property
    def is_default(self) -> bool:
        return self.driver_id is None

    def applies_on(self, day: Optional[date]) -> bool:
        if not self.is_active:
            return False
        if day is None:
            return True
        if self.effective_from and day < self.effective_from:
            return False
        if self.effective_to and day > self.effective_to:
            return False
        return True

    def to_dict(self) -> dict:
        return {
            "id": self.rate_id,
            "companyId": self.company_id,
            "driverId": self.driver_id,
            "baseRate": str(self.base_rate),
            "nightRate": str(self.night_rate),
            "weekendRate": str(self.weekend_rate),
            "bankHolidayRate": str(self.bank_holiday_rate),
            "overtimeMultiplier": str(self.overtime_multiplier),
            "nightStartHour": self.night_start_hour,
            "nightEndHour": self.night_end_hour,
            "dailyOvertimeThresholdMinutes": self.daily_overtime_threshold_minutes,
            "weeklyOvertimeThresholdMinutes": self.weekly_overtime_threshold_minutes,
            "active": self.is_active,
            "effectiveFrom": self.effective_from.isoformat() if self.effective_from else None,
            "effectiveTo": self.effective_to.isoformat() if self.effective_to else None,
        }

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import MINUTES_PER_HOUR, PAY_QUANTUM
from ...core.exceptions import InvalidShiftError
from ...rates.model import PayRate
from ..model import BucketedMinutes, WageBreakdown
from .base import WageCalculator


def _pay(minutes: int, hourly_rate: Decimal) -> Decimal:
    return Decimal(minutes) * hourly_rate / MINUTES_PER_HOUR


class StandardWageCalculator(WageCalculator):
    """Standard rule: hours x category rate; overtime at base rate x multiplier.

    Components stay unrounded; the total is rounded half-up to pence once.
    """

    def calculate(self, bucketed: BucketedMinutes, rate: PayRate) -> WageBreakdown:
        if bucketed.total_minutes <= 0:
            raise InvalidShiftError(f"Shift {bucketed.shift_id} has no worked minutes")

        regular_pay = _pay(bucketed.regular_minutes, rate.base_rate)
        night_pay = _pay(bucketed.night_minutes, rate.night_rate)
        weekend_pay = _pay(bucketed.weekend_minutes, rate.weekend_rate)
        bank_holiday_pay = _pay(bucketed.bank_holiday_minutes, rate.bank_holiday_rate)
        overtime_pay = _pay(bucketed.overtime_minutes, rate.base_rate * rate.overtime_multiplier)

        total = regular_pay + night_pay + weekend_pay + bank_holiday_pay + overtime_pay

        return WageBreakdown(
            driver_id=bucketed.driver_id,
            shift_id=bucketed.shift_id,
            rate_id=rate.rate_id,
            work_date=bucketed.work_date,
            regular_minutes=bucketed.regular_minutes,
            night_minutes=bucketed.night_minutes,
            weekend_minutes=bucketed.weekend_minutes,
            bank_holiday_minutes=bucketed.bank_holiday_minutes,
            overtime_minutes=bucketed.overtime_minutes,
            regular_pay=regular_pay,
            night_pay=night_pay,
            weekend_pay=weekend_pay,
            bank_holiday_pay=bank_holiday_pay,
            overtime_pay=overtime_pay,
            total_pay=total.quantize(PAY_QUANTUM, rounding=ROUND_HALF_UP),
        )

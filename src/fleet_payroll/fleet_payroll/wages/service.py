from __future__ import annotations

from typing import Optional

from ..holidays.model import HolidayCalendar
from ..holidays.repository import BankHolidayRepository
from ..rates.model import PayRate
from ..rates.resolver import RateResolver
from ..shifts.model import Shift
from .bucketer import Holidays, ShiftBucketer
from .calculator.base import WageCalculator
from .calculator.standard_calculator import StandardWageCalculator
from .model import WageBreakdown


class WageService:
    """Price single shifts: resolve the rate, bucket the minutes, apply rates."""

    def __init__(
        self,
        resolver: RateResolver,
        holidays: BankHolidayRepository,
        *,
        bucketer: Optional[ShiftBucketer] = None,
        calculator: Optional[WageCalculator] = None,
    ):
        self._resolver = resolver
        self._holidays = holidays
        self._bucketer = bucketer or ShiftBucketer()
        self._calculator = calculator or StandardWageCalculator()

    @property
    def bucketer(self) -> ShiftBucketer:
        return self._bucketer

    def price(self, shift: Shift, rate: PayRate, holidays: Holidays) -> WageBreakdown:
        """Pure step shared with batch runs that already hold rate and holidays."""
        bucketed = self._bucketer.bucket(shift, rate, holidays)
        return self._calculator.calculate(bucketed, rate)

    def calculate_shift(self, shift: Shift) -> WageBreakdown:
        rate = self._resolver.resolve(shift.company_id, shift.driver_id, on=self._bucketer.work_date(shift))
        calendar = HolidayCalendar(self._holidays.list_for_company(shift.company_id), company_id=shift.company_id)
        return self.price(shift, rate, calendar)

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from src.fleet_payroll.fleet_payroll.holidays.model import BankHoliday
from src.fleet_payroll.fleet_payroll.rates.model import PayRate
from src.fleet_payroll.fleet_payroll.shifts.model import Shift


class InMemoryPayRates:
    def __init__(self, rates=()):
        self._rows: dict[int, PayRate] = {}
        self._id = 0
        for r in rates:
            self._id = max(self._id, r.rate_id)
            self._rows[r.rate_id] = r

    def list_for_company(self, company_id: int):
        return [r for r in self._rows.values() if r.company_id == company_id]

    def get_by_id(self, rate_id: int) -> Optional[PayRate]:
        return self._rows.get(rate_id)

    def create(self, rate: PayRate) -> int:
        self._id += 1
        self._rows[self._id] = replace(rate, rate_id=self._id)
        return self._id

    def update(self, rate: PayRate) -> bool:
        if rate.rate_id not in self._rows:
            return False
        self._rows[rate.rate_id] = rate
        return True

    def delete(self, *, rate_id: int) -> bool:
        return self._rows.pop(rate_id, None) is not None


class InMemoryHolidays:
    def __init__(self, holidays=()):
        self._rows: list[BankHoliday] = list(holidays)

    def list_for_company(self, company_id: int):
        return [h for h in self._rows if h.company_id == company_id]

    def create(self, *, company_id: int, name: str, holiday_date: date, is_recurring: bool = False) -> int:
        holiday_id = len(self._rows) + 1
        self._rows.append(
            BankHoliday(
                holiday_id=holiday_id,
                company_id=company_id,
                name=name,
                holiday_date=holiday_date,
                is_recurring=is_recurring,
            )
        )
        return holiday_id


class InMemoryShifts:
    def __init__(self, shifts=()):
        self._rows: list[Shift] = list(shifts)
        self.last_args = None

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        for s in self._rows:
            if s.shift_id == shift_id:
                return s
        return None

    def list_for_period(self, *, company_id: int, start: date, end: date):
        self.last_args = {"company_id": company_id, "start": start, "end": end}
        return [
            s
            for s in self._rows
            if s.company_id == company_id and start <= s.arrival_time.date() <= end
        ]


def build_rate(**overrides) -> PayRate:
    values = dict(
        rate_id=1,
        company_id=1,
        driver_id=None,
        base_rate=Decimal("12.00"),
        night_rate=Decimal("15.00"),
        weekend_rate=Decimal("18.00"),
        bank_holiday_rate=Decimal("24.00"),
        overtime_multiplier=Decimal("1.5"),
        night_start_hour=22,
        night_end_hour=6,
        daily_overtime_threshold_minutes=480,
        weekly_overtime_threshold_minutes=2400,
    )
    values.update(overrides)
    return PayRate(**values)


@pytest.fixture
def make_rate():
    return build_rate


@pytest.fixture
def default_rate() -> PayRate:
    return build_rate()


@pytest.fixture
def rates_repo():
    return InMemoryPayRates


@pytest.fixture
def holidays_repo():
    return InMemoryHolidays


@pytest.fixture
def shifts_repo():
    return InMemoryShifts

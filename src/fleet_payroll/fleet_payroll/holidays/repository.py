from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import BankHoliday


class BankHolidayRepository(Protocol):
    def list_for_company(self, company_id: int) -> Sequence[BankHoliday]:
        raise NotImplementedError

    def create(self, *, company_id: int, name: str, holiday_date: date, is_recurring: bool = False) -> int:
        """Returns holiday_id."""

        raise NotImplementedError

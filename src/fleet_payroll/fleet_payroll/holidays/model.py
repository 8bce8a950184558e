from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional


@dataclass(frozen=True)
class BankHoliday:
    """Domain entity: a company-configured premium-rate day."""

    holiday_id: int
    company_id: int
    name: str
    holiday_date: date
    is_recurring: bool = False

    def matches(self, day: date) -> bool:
        if self.is_recurring:
            return (day.month, day.day) == (self.holiday_date.month, self.holiday_date.day)
        return day == self.holiday_date

    def to_dict(self) -> dict:
        return {
            "id": self.holiday_id,
            "companyId": self.company_id,
            "name": self.name,
            "date": self.holiday_date.isoformat(),
            "isRecurring": self.is_recurring,
        }


class HolidayCalendar:
    """Read-only bank holiday lookup for one company."""

    def __init__(self, holidays: Iterable[BankHoliday], *, company_id: Optional[int] = None):
        rows = [h for h in holidays if company_id is None or h.company_id == company_id]
        self._company_id = company_id
        self._dates = frozenset(h.holiday_date for h in rows if not h.is_recurring)
        self._month_days = frozenset((h.holiday_date.month, h.holiday_date.day) for h in rows if h.is_recurring)

    @property
    def company_id(self) -> Optional[int]:
        return self._company_id

    def is_holiday(self, day: date) -> bool:
        return day in self._dates or (day.month, day.day) in self._month_days

    def __len__(self) -> int:
        return len(self._dates) + len(self._month_days)

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.exceptions import ValidationError
from .govuk import GovUkHolidayFeed
from .model import BankHoliday, HolidayCalendar
from .repository import BankHolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    def __init__(self, holidays: BankHolidayRepository, *, feed: Optional[GovUkHolidayFeed] = None):
        self._holidays = holidays
        self._feed = feed

    def list_for_company(self, company_id: int) -> Sequence[BankHoliday]:
        rows = self._holidays.list_for_company(require_positive_int(company_id, "companyId"))
        return sorted(rows, key=lambda h: (h.holiday_date, h.holiday_id))

    def calendar_for(self, company_id: int) -> HolidayCalendar:
        return HolidayCalendar(self._holidays.list_for_company(int(company_id)), company_id=int(company_id))

    def add_holiday(self, *, company_id: int, name: str, holiday_date: date, is_recurring: bool = False) -> int:
        company_id = require_positive_int(company_id, "companyId")
        name = require_non_empty(name, "name")

        for h in self._holidays.list_for_company(company_id):
            if h.holiday_date == holiday_date:
                raise ValidationError(f"{holiday_date.isoformat()} is already a bank holiday ({h.name})")

        holiday_id = self._holidays.create(
            company_id=company_id,
            name=name,
            holiday_date=holiday_date,
            is_recurring=bool(is_recurring),
        )
        logger.info("Bank holiday %s (%s) added for company %s", name, holiday_date.isoformat(), company_id)
        return holiday_id

    def import_uk_holidays(self, *, company_id: int, year: int) -> int:
        """Insert the GOV.UK holidays of `year` the company does not have yet.

        Returns the number of rows added.
        """
        company_id = require_positive_int(company_id, "companyId")
        year = require_positive_int(year, "year")
        if not self._feed:
            raise ValidationError("No public holiday feed configured")

        existing = {h.holiday_date for h in self._holidays.list_for_company(company_id)}
        added = 0
        for holiday in self._feed.holidays_for(year):
            if holiday.holiday_date in existing:
                continue
            self._holidays.create(
                company_id=company_id,
                name=holiday.name,
                holiday_date=holiday.holiday_date,
                is_recurring=False,
            )
            existing.add(holiday.holiday_date)
            added += 1

        logger.info("Imported %s UK bank holidays for company %s (%s)", added, company_id, year)
        return added

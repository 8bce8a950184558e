from datetime import date

import pytest

from src.fleet_payroll.fleet_payroll.core.exceptions import ValidationError
from src.fleet_payroll.fleet_payroll.holidays.govuk import PublicHoliday
from src.fleet_payroll.fleet_payroll.holidays.model import BankHoliday, HolidayCalendar
from src.fleet_payroll.fleet_payroll.holidays.service import HolidayService


class FakeFeed:
    def __init__(self, holidays):
        self._holidays = holidays
        self.years = []

    def holidays_for(self, year):
        self.years.append(year)
        return [h for h in self._holidays if h.holiday_date.year == year]


def _holiday(holiday_id, day, *, company_id=1, recurring=False, name="Holiday"):
    return BankHoliday(holiday_id=holiday_id, company_id=company_id, name=name, holiday_date=day, is_recurring=recurring)


def test_calendar_exact_and_recurring_dates():
    cal = HolidayCalendar(
        [
            _holiday(1, date(2025, 4, 21)),
            _holiday(2, date(2000, 12, 25), recurring=True),
            _holiday(3, date(2025, 5, 5), company_id=2),
        ],
        company_id=1,
    )

    assert cal.is_holiday(date(2025, 4, 21))
    assert not cal.is_holiday(date(2026, 4, 21))
    assert cal.is_holiday(date(2031, 12, 25))
    assert not cal.is_holiday(date(2025, 5, 5))
    assert len(cal) == 2


def test_list_sorted_by_date(holidays_repo):
    svc = HolidayService(holidays_repo([_holiday(1, date(2025, 12, 25)), _holiday(2, date(2025, 1, 1))]))

    assert [h.holiday_id for h in svc.list_for_company(1)] == [2, 1]


def test_add_holiday(holidays_repo):
    repo = holidays_repo()
    svc = HolidayService(repo)

    holiday_id = svc.add_holiday(company_id=1, name=" Boxing Day ", holiday_date=date(2025, 12, 26), is_recurring=True)

    stored = repo.list_for_company(1)
    assert [h.holiday_id for h in stored] == [holiday_id]
    assert stored[0].name == "Boxing Day"
    assert stored[0].is_recurring is True
    assert svc.calendar_for(1).is_holiday(date(2030, 12, 26))


def test_add_holiday_rejects_duplicate_date(holidays_repo):
    svc = HolidayService(holidays_repo([_holiday(1, date(2025, 12, 25), name="Christmas Day")]))

    with pytest.raises(ValidationError):
        svc.add_holiday(company_id=1, name="Christmas", holiday_date=date(2025, 12, 25))


def test_add_holiday_requires_name(holidays_repo):
    with pytest.raises(ValidationError):
        HolidayService(holidays_repo()).add_holiday(company_id=1, name="  ", holiday_date=date(2025, 12, 25))


def test_import_uk_holidays_skips_existing_dates(holidays_repo):
    feed = FakeFeed(
        [
            PublicHoliday(name="New Year's Day", holiday_date=date(2025, 1, 1)),
            PublicHoliday(name="Good Friday", holiday_date=date(2025, 4, 18)),
            PublicHoliday(name="Christmas Day", holiday_date=date(2025, 12, 25)),
            PublicHoliday(name="New Year's Day", holiday_date=date(2026, 1, 1)),
        ]
    )
    repo = holidays_repo([_holiday(1, date(2025, 12, 25), name="Christmas")])
    svc = HolidayService(repo, feed=feed)

    added = svc.import_uk_holidays(company_id=1, year=2025)

    assert added == 2
    assert feed.years == [2025]
    assert sorted(h.holiday_date for h in repo.list_for_company(1)) == [
        date(2025, 1, 1),
        date(2025, 4, 18),
        date(2025, 12, 25),
    ]
    assert svc.import_uk_holidays(company_id=1, year=2025) == 0


def test_import_without_feed(holidays_repo):
    with pytest.raises(ValidationError):
        HolidayService(holidays_repo()).import_uk_holidays(company_id=1, year=2025)

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.fleet_payroll.fleet_payroll.container import build_services
from src.fleet_payroll.fleet_payroll.core.exceptions import ConfigurationError, ValidationError
from src.fleet_payroll.fleet_payroll.holidays.model import BankHoliday
from src.fleet_payroll.fleet_payroll.shifts.model import Shift


def _shift(shift_id, driver_id, arrival, departure, **kw):
    return Shift(
        shift_id=shift_id,
        company_id=1,
        driver_id=driver_id,
        arrival_time=arrival,
        departure_time=departure,
        **kw,
    )


@pytest.fixture
def services(rates_repo, holidays_repo, shifts_repo, make_rate):
    def build(shifts, rates=None, holidays=()):
        return build_services(
            rates_repo=rates_repo(rates if rates is not None else [make_rate()]),
            holidays_repo=holidays_repo(holidays),
            shifts_repo=shifts_repo(shifts),
        )

    return build


def test_calculate_shift_uses_driver_override(services, make_rate):
    rates = [make_rate(), make_rate(rate_id=2, driver_id=7, base_rate=Decimal("20.00"))]
    shift = _shift(1, 7, datetime(2025, 3, 3, 9, 0), datetime(2025, 3, 3, 10, 0))
    c = services([shift], rates)

    out = c.wage_service.calculate_shift(shift)

    assert out.rate_id == 2
    assert out.total_pay == Decimal("20.00")


def test_calculate_shift_picks_rate_effective_on_work_date(services, make_rate):
    rates = [
        make_rate(effective_to=date(2025, 3, 31)),
        make_rate(rate_id=2, base_rate=Decimal("13.00"), effective_from=date(2025, 4, 1)),
    ]
    march = _shift(1, 7, datetime(2025, 3, 31, 9, 0), datetime(2025, 3, 31, 10, 0))
    april = _shift(2, 7, datetime(2025, 4, 1, 9, 0), datetime(2025, 4, 1, 10, 0))
    c = services([march, april], rates)

    assert c.wage_service.calculate_shift(march).total_pay == Decimal("12.00")
    assert c.wage_service.calculate_shift(april).total_pay == Decimal("13.00")


def test_calculate_shift_reads_company_holidays(services):
    holidays = [BankHoliday(holiday_id=1, company_id=1, name="Easter Monday", holiday_date=date(2025, 4, 21))]
    shift = _shift(1, 7, datetime(2025, 4, 21, 9, 0), datetime(2025, 4, 21, 10, 0))
    c = services([shift], holidays=holidays)

    out = c.wage_service.calculate_shift(shift)

    assert out.bank_holiday_minutes == 60
    assert out.total_pay == Decimal("24.00")


def test_report_rows_and_summary(services):
    shifts = [
        _shift(1, 7, datetime(2025, 3, 3, 8, 0), datetime(2025, 3, 3, 17, 30), driver_name="Ann", depot_name="North"),
        _shift(2, 7, datetime(2025, 3, 4, 8, 0), datetime(2025, 3, 4, 9, 0), driver_name="Ann", depot_name="North"),
        _shift(3, 8, datetime(2025, 3, 7, 20, 0), datetime(2025, 3, 8, 4, 0)),
    ]
    c = services(shifts)

    report = c.wage_report_service.build_wage_report(company_id=1, start=date(2025, 3, 1), end=date(2025, 3, 31))

    assert len(report.rows) == 3
    first = report.rows[0]
    assert first["shiftId"] == 1
    assert first["driverName"] == "Ann"
    assert first["date"] == "03/03/2025"
    assert first["day"] == "Monday"
    assert first["clockIn"] == "08:00"
    assert first["clockOut"] == "17:30"
    assert first["depot"] == "North"
    assert first["totalHours"] == "9.50"
    assert first["regularHours"] == "8.00"
    assert first["overtimeHours"] == "1.50"
    assert first["baseRate"] == "12.00"
    assert first["overtimePay"] == "27.00"
    assert first["totalPay"] == "123.00"

    third = report.rows[2]
    assert third["driverName"] == "Driver 8"
    assert third["depot"] == "Unknown"
    assert third["totalPay"] == "126.00"

    assert report.summary == [
        {"driverId": 7, "driverName": "Ann", "shifts": 2, "totalHours": "10.50", "totalPay": "135.00"},
        {"driverId": 8, "driverName": "Driver 8", "shifts": 1, "totalHours": "8.00", "totalPay": "126.00"},
    ]
    assert report.failures == []


def test_report_skips_open_shifts_and_records_bad_ones(services):
    shifts = [
        _shift(1, 7, datetime(2025, 3, 3, 8, 0), datetime(2025, 3, 3, 9, 0)),
        _shift(2, 7, datetime(2025, 3, 4, 8, 0), None),
        _shift(3, 8, datetime(2025, 3, 5, 8, 0), datetime(2025, 3, 5, 7, 0)),
    ]
    c = services(shifts)

    report = c.wage_report_service.build_wage_report(company_id=1, start=date(2025, 3, 1), end=date(2025, 3, 31))

    assert [r["shiftId"] for r in report.rows] == [1]
    assert report.skipped_open == 1
    assert len(report.failures) == 1
    assert report.failures[0]["shiftId"] == 3
    assert report.failures[0]["driverId"] == 8
    assert "after arrival" in report.failures[0]["reason"]


def test_report_passes_date_range_to_repository(services):
    c = services([])

    c.wage_report_service.build_wage_report(company_id=1, start=date(2025, 3, 1), end=date(2025, 3, 7))

    assert c.shifts_repo.last_args == {"company_id": 1, "start": date(2025, 3, 1), "end": date(2025, 3, 7)}


def test_report_rejects_inverted_range(services):
    c = services([])

    with pytest.raises(ValidationError):
        c.wage_report_service.build_wage_report(company_id=1, start=date(2025, 3, 8), end=date(2025, 3, 1))


def test_report_without_default_rate_fails_fast(services, make_rate):
    c = services(
        [_shift(1, 7, datetime(2025, 3, 3, 8, 0), datetime(2025, 3, 3, 9, 0))],
        rates=[make_rate(driver_id=7)],
    )

    with pytest.raises(ConfigurationError):
        c.wage_report_service.build_wage_report(company_id=1, start=date(2025, 3, 1), end=date(2025, 3, 31))

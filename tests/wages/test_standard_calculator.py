from datetime import date
from decimal import Decimal

import pytest

from src.fleet_payroll.fleet_payroll.core.exceptions import InvalidShiftError
from src.fleet_payroll.fleet_payroll.wages.calculator.standard_calculator import StandardWageCalculator
from src.fleet_payroll.fleet_payroll.wages.model import BucketedMinutes


def _minutes(**kw):
    return BucketedMinutes(driver_id=7, shift_id=1, work_date=date(2025, 3, 3), **kw)


def test_regular_plus_overtime(default_rate):
    out = StandardWageCalculator().calculate(_minutes(regular_minutes=480, overtime_minutes=90), default_rate)

    assert out.regular_pay == Decimal("96")
    assert out.overtime_pay == Decimal("27")
    assert out.total_pay == Decimal("123.00")
    assert out.rate_id == default_rate.rate_id


def test_only_overtime_pay_scales_with_multiplier(make_rate):
    bucketed = _minutes(
        regular_minutes=120,
        night_minutes=60,
        weekend_minutes=30,
        bank_holiday_minutes=15,
        overtime_minutes=90,
    )

    base = StandardWageCalculator().calculate(bucketed, make_rate())
    tripled = StandardWageCalculator().calculate(bucketed, make_rate(overtime_multiplier=Decimal("3")))

    assert base.overtime_pay == Decimal("27")
    assert tripled.overtime_pay == Decimal("54")
    assert tripled.overtime_pay == base.overtime_pay * 2
    assert tripled.regular_pay == base.regular_pay == Decimal("24")
    assert tripled.night_pay == base.night_pay == Decimal("15")
    assert tripled.weekend_pay == base.weekend_pay == Decimal("9")
    assert tripled.bank_holiday_pay == base.bank_holiday_pay == Decimal("6")
    assert base.total_pay == Decimal("81.00")
    assert tripled.total_pay == Decimal("108.00")


def test_mixed_categories(default_rate):
    out = StandardWageCalculator().calculate(
        _minutes(regular_minutes=120, night_minutes=120, weekend_minutes=240),
        default_rate,
    )

    assert out.regular_pay == Decimal("24")
    assert out.night_pay == Decimal("30")
    assert out.weekend_pay == Decimal("72")
    assert out.total_pay == Decimal("126.00")


def test_bank_holiday_rate_applies(default_rate):
    out = StandardWageCalculator().calculate(_minutes(bank_holiday_minutes=30), default_rate)

    assert out.bank_holiday_pay == Decimal("12")
    assert out.total_pay == Decimal("12.00")


def test_components_are_not_rounded(make_rate):
    rate = make_rate(base_rate=Decimal("10.00"))

    out = StandardWageCalculator().calculate(_minutes(regular_minutes=7), rate)

    # 7/60 * 10 = 1.1666...
    assert out.regular_pay > Decimal("1.16")
    assert out.regular_pay < Decimal("1.17")
    assert out.total_pay == Decimal("1.17")


def test_total_rounds_half_up(make_rate):
    rate = make_rate(base_rate=Decimal("0.30"))

    out = StandardWageCalculator().calculate(_minutes(regular_minutes=1), rate)

    assert out.regular_pay == Decimal("0.005")
    assert out.total_pay == Decimal("0.01")


def test_total_is_rounded_after_summing(make_rate):
    # Two components of 0.004 each would round to 0.00 individually.
    rate = make_rate(base_rate=Decimal("0.24"), night_rate=Decimal("0.24"))

    out = StandardWageCalculator().calculate(_minutes(regular_minutes=1, night_minutes=1), rate)

    assert out.regular_pay == Decimal("0.004")
    assert out.night_pay == Decimal("0.004")
    assert out.total_pay == Decimal("0.01")


def test_zero_minutes_rejected(default_rate):
    with pytest.raises(InvalidShiftError):
        StandardWageCalculator().calculate(_minutes(), default_rate)


def test_to_dict_formats_money_to_pence(make_rate):
    rate = make_rate(base_rate=Decimal("10.00"))

    data = StandardWageCalculator().calculate(_minutes(regular_minutes=7), rate).to_dict()

    assert data["regularPay"] == "1.17"
    assert data["totalPay"] == "1.17"
    assert data["totalMinutes"] == 7
    assert data["workDate"] == "2025-03-03"

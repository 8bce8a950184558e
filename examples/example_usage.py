"""Example: price one shift with the wage engine alone (no Flask, no database).

Company default rate, Monday 08:00-17:30: 480 regular minutes + 90 overtime.
"""

from datetime import datetime
from decimal import Decimal

from src.fleet_payroll.fleet_payroll.rates.model import PayRate
from src.fleet_payroll.fleet_payroll.shifts.model import Shift
from src.fleet_payroll.fleet_payroll.wages.bucketer import ShiftBucketer
from src.fleet_payroll.fleet_payroll.wages.calculator.standard_calculator import StandardWageCalculator


def main():
    rate = PayRate(
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
    shift = Shift(
        shift_id=1,
        company_id=1,
        driver_id=7,
        arrival_time=datetime(2025, 3, 3, 8, 0),
        departure_time=datetime(2025, 3, 3, 17, 30),
    )

    bucketed = ShiftBucketer(timezone="Europe/London").bucket(shift, rate, [])
    print(StandardWageCalculator().calculate(bucketed, rate).to_dict())


if __name__ == "__main__":
    main()

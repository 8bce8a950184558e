from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..common.datetime_utils import format_hours, to_local
from ..core.constants import PAY_QUANTUM
from ..core.exceptions import InvalidShiftError, ValidationError
from ..holidays.model import HolidayCalendar
from ..holidays.repository import BankHolidayRepository
from ..rates.resolver import RateResolver
from ..shifts.repository import ShiftRepository
from .service import WageService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WageReport:
    rows: list[dict]
    summary: list[dict]
    failures: list[dict]
    skipped_open: int = 0


def _money(value: Decimal) -> str:
    return str(value.quantize(PAY_QUANTUM))


class WageReportService:
    """Batch wage export for one company and date range.

    Rates and holidays are loaded once per run. A company without a default
    rate aborts the run with ConfigurationError; a bad shift is recorded in
    `failures` and the run carries on.
    """

    def __init__(
        self,
        shifts: ShiftRepository,
        resolver: RateResolver,
        holidays: BankHolidayRepository,
        wages: WageService,
    ):
        self._shifts = shifts
        self._resolver = resolver
        self._holidays = holidays
        self._wages = wages

    def build_wage_report(self, *, company_id: int, start: date, end: date) -> WageReport:
        if end < start:
            raise ValidationError("endDate must not be before startDate")

        rate_book = self._resolver.rate_book(company_id)
        calendar = HolidayCalendar(self._holidays.list_for_company(company_id), company_id=company_id)
        bucketer = self._wages.bucketer

        rows: list[dict] = []
        failures: list[dict] = []
        summary_map: dict[int, dict] = {}
        skipped_open = 0

        for shift in self._shifts.list_for_period(company_id=company_id, start=start, end=end):
            if not shift.is_completed:
                skipped_open += 1
                continue

            try:
                rate = rate_book.for_driver(shift.driver_id, on=bucketer.work_date(shift))
                wages = self._wages.price(shift, rate, calendar)
            except InvalidShiftError as e:
                logger.warning("Skipping shift %s of driver %s: %s", shift.shift_id, shift.driver_id, e)
                failures.append({"shiftId": shift.shift_id, "driverId": shift.driver_id, "reason": str(e)})
                continue

            arrival = to_local(shift.arrival_time, bucketer.timezone)
            departure = to_local(shift.departure_time, bucketer.timezone)
            driver_name = shift.driver_name or f"Driver {shift.driver_id}"

            rows.append(
                {
                    "shiftId": shift.shift_id,
                    "driverId": shift.driver_id,
                    "driverName": driver_name,
                    "date": arrival.strftime("%d/%m/%Y"),
                    "day": arrival.strftime("%A"),
                    "clockIn": arrival.strftime("%H:%M"),
                    "clockOut": departure.strftime("%H:%M"),
                    "depot": shift.depot_name or "Unknown",
                    "totalHours": format_hours(wages.total_minutes),
                    "regularHours": format_hours(wages.regular_minutes),
                    "nightHours": format_hours(wages.night_minutes),
                    "weekendHours": format_hours(wages.weekend_minutes),
                    "bankHolidayHours": format_hours(wages.bank_holiday_minutes),
                    "overtimeHours": format_hours(wages.overtime_minutes),
                    "baseRate": _money(rate.base_rate),
                    "nightRate": _money(rate.night_rate),
                    "weekendRate": _money(rate.weekend_rate),
                    "bankHolidayRate": _money(rate.bank_holiday_rate),
                    "regularPay": _money(wages.regular_pay),
                    "nightPay": _money(wages.night_pay),
                    "weekendPay": _money(wages.weekend_pay),
                    "bankHolidayPay": _money(wages.bank_holiday_pay),
                    "overtimePay": _money(wages.overtime_pay),
                    "totalPay": _money(wages.total_pay),
                }
            )

            s = summary_map.get(shift.driver_id)
            if not s:
                s = {
                    "driverId": shift.driver_id,
                    "driverName": driver_name,
                    "shifts": 0,
                    "total_minutes": 0,
                    "total_pay": Decimal("0"),
                }
                summary_map[shift.driver_id] = s
            s["shifts"] += 1
            s["total_minutes"] += wages.total_minutes
            s["total_pay"] += wages.total_pay

        summary = []
        for s in summary_map.values():
            summary.append(
                {
                    "driverId": s["driverId"],
                    "driverName": s["driverName"],
                    "shifts": s["shifts"],
                    "totalHours": format_hours(s["total_minutes"]),
                    "totalPay": _money(s["total_pay"]),
                }
            )
        summary.sort(key=lambda x: Decimal(x["totalPay"]), reverse=True)

        logger.info(
            "Wage report for company %s (%s..%s): %s rows, %s failed, %s open",
            company_id,
            start.isoformat(),
            end.isoformat(),
            len(rows),
            len(failures),
            skipped_open,
        )
        return WageReport(rows=rows, summary=summary, failures=failures, skipped_open=skipped_open)

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

from ..common.datetime_utils import get_timezone, next_quarter_hour, to_local, to_utc
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import WageCategory
from ..core.exceptions import InvalidShiftError
from ..holidays.model import BankHoliday, HolidayCalendar
from ..rates.model import PayRate
from ..shifts.model import Shift
from .model import BucketedMinutes

Holidays = Union[HolidayCalendar, Iterable[BankHoliday], None]


def is_night_hour(hour: int, start_hour: int, end_hour: int) -> bool:
    """Night window is [start_hour, end_hour); start > end wraps past midnight."""
    if start_hour == end_hour:
        return False
    if start_hour < end_hour:
        return start_hour <= hour < end_hour
    return hour >= start_hour or hour < end_hour


def classify(local: datetime, rate: PayRate, calendar: HolidayCalendar) -> WageCategory:
    """Category of a non-overtime minute: bank holiday > weekend > night > regular."""
    day = local.date()
    if calendar.is_holiday(day):
        return WageCategory.BANK_HOLIDAY
    if day.weekday() >= 5:
        return WageCategory.WEEKEND
    if is_night_hour(local.hour, rate.night_start_hour, rate.night_end_hour):
        return WageCategory.NIGHT
    return WageCategory.REGULAR


class ShiftBucketer:
    """Partition a completed shift's minutes into wage categories.

    The shift is split at every local midnight. Within each calendar day the
    first `daily_overtime_threshold_minutes` minutes are classified by
    `classify`; anything beyond is overtime. Naive timestamps are wall-clock
    time in the bucketer's timezone; elapsed minutes are real minutes, so a
    night shift across a DST change is one hour shorter or longer.
    """

    def __init__(self, *, timezone: str = DEFAULT_TIMEZONE):
        self._tz = get_timezone(timezone)

    @property
    def timezone(self):
        return self._tz

    def work_date(self, shift: Shift) -> date:
        """Local calendar date the shift started on."""
        return to_local(shift.arrival_time, self._tz).date()

    def bucket(self, shift: Shift, rate: PayRate, holidays: Holidays = None) -> BucketedMinutes:
        if shift.departure_time is None:
            raise InvalidShiftError(f"Shift {shift.shift_id} is still open")

        start = to_utc(shift.arrival_time, self._tz)
        end = to_utc(shift.departure_time, self._tz)
        if end <= start:
            raise InvalidShiftError(f"Shift {shift.shift_id} departure must be after arrival")

        total_minutes = int((end - start).total_seconds() // 60)
        if total_minutes <= 0:
            raise InvalidShiftError(f"Shift {shift.shift_id} is shorter than one minute")

        calendar = self._calendar(holidays, rate.company_id)
        threshold = int(rate.daily_overtime_threshold_minutes)

        minutes = {category: 0 for category in WageCategory}
        worked_by_day: dict[date, int] = {}

        cursor = start.replace(second=0, microsecond=0)
        end = cursor + timedelta(minutes=total_minutes)
        while cursor < end:
            piece_end = min(next_quarter_hour(cursor), end)
            piece = int((piece_end - cursor).total_seconds() // 60)

            local = cursor.astimezone(self._tz)
            day = local.date()
            worked = worked_by_day.get(day, 0)
            within_threshold = min(piece, max(threshold - worked, 0))

            minutes[classify(local, rate, calendar)] += within_threshold
            minutes[WageCategory.OVERTIME] += piece - within_threshold
            worked_by_day[day] = worked + piece

            cursor = piece_end

        return BucketedMinutes(
            driver_id=shift.driver_id,
            shift_id=shift.shift_id,
            work_date=start.astimezone(self._tz).date(),
            regular_minutes=minutes[WageCategory.REGULAR],
            night_minutes=minutes[WageCategory.NIGHT],
            weekend_minutes=minutes[WageCategory.WEEKEND],
            bank_holiday_minutes=minutes[WageCategory.BANK_HOLIDAY],
            overtime_minutes=minutes[WageCategory.OVERTIME],
        )

    @staticmethod
    def _calendar(holidays: Holidays, company_id: Optional[int]) -> HolidayCalendar:
        if isinstance(holidays, HolidayCalendar):
            return holidays
        return HolidayCalendar(holidays or (), company_id=company_id)

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import (
    DEFAULT_TIMEZONE,
    GOVUK_BANK_HOLIDAYS_URL,
    GOVUK_DEFAULT_DIVISION,
    HOLIDAY_CACHE_TTL_SECONDS,
)
from .database.connection import DBConfig, DatabaseConnection
from .holidays.govuk import GovUkHolidayFeed
from .holidays.mysql_holiday_repository import MySQLBankHolidayRepository
from .holidays.repository import BankHolidayRepository
from .holidays.service import HolidayService
from .rates.mysql_pay_rate_repository import MySQLPayRateRepository
from .rates.repository import PayRateRepository
from .rates.resolver import RateResolver
from .rates.service import PayRateService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .wages.bucketer import ShiftBucketer
from .wages.report_service import WageReportService
from .wages.service import WageService


@dataclass(frozen=True)
class Container:
    rates_repo: PayRateRepository
    holidays_repo: BankHolidayRepository
    shifts_repo: ShiftRepository

    rate_resolver: RateResolver
    pay_rate_service: PayRateService
    holiday_service: HolidayService
    wage_service: WageService
    wage_report_service: WageReportService


def build_services(
    *,
    rates_repo: PayRateRepository,
    holidays_repo: BankHolidayRepository,
    shifts_repo: ShiftRepository,
    timezone: str = DEFAULT_TIMEZONE,
    holiday_feed: Optional[GovUkHolidayFeed] = None,
) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""
    rate_resolver = RateResolver(rates_repo)
    wage_service = WageService(rate_resolver, holidays_repo, bucketer=ShiftBucketer(timezone=timezone))

    return Container(
        rates_repo=rates_repo,
        holidays_repo=holidays_repo,
        shifts_repo=shifts_repo,
        rate_resolver=rate_resolver,
        pay_rate_service=PayRateService(rates_repo),
        holiday_service=HolidayService(holidays_repo, feed=holiday_feed),
        wage_service=wage_service,
        wage_report_service=WageReportService(shifts_repo, rate_resolver, holidays_repo, wage_service),
    )


def build_container(*, db_config: dict, settings: object = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    feed = GovUkHolidayFeed(
        url=getattr(settings, "GOVUK_BANK_HOLIDAYS_URL", GOVUK_BANK_HOLIDAYS_URL),
        division=getattr(settings, "GOVUK_DIVISION", GOVUK_DEFAULT_DIVISION),
        ttl_seconds=int(getattr(settings, "HOLIDAY_CACHE_TTL_SECONDS", HOLIDAY_CACHE_TTL_SECONDS)),
    )

    return build_services(
        rates_repo=MySQLPayRateRepository(conn),
        holidays_repo=MySQLBankHolidayRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        timezone=str(getattr(settings, "WAGE_TIMEZONE", DEFAULT_TIMEZONE)),
        holiday_feed=feed,
    )

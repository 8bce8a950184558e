from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    normalize_mysql_date,
    normalize_mysql_decimal,
)
from .model import PayRate
from .repository import PayRateRepository

_COLUMNS = """
    rate_id, company_id, driver_id, base_rate, night_rate, weekend_rate,
    bank_holiday_rate, overtime_multiplier, night_start_hour, night_end_hour,
    daily_overtime_threshold, weekly_overtime_threshold, is_active,
    effective_from, effective_to
"""


def _to_model(r: dict) -> PayRate:
    return PayRate(
        rate_id=int(r["rate_id"]),
        company_id=int(r["company_id"]),
        driver_id=int(r["driver_id"]) if r.get("driver_id") is not None else None,
        base_rate=normalize_mysql_decimal(r["base_rate"]),
        night_rate=normalize_mysql_decimal(r["night_rate"]),
        weekend_rate=normalize_mysql_decimal(r["weekend_rate"]),
        bank_holiday_rate=normalize_mysql_decimal(r["bank_holiday_rate"]),
        overtime_multiplier=normalize_mysql_decimal(r["overtime_multiplier"]),
        night_start_hour=int(r["night_start_hour"]),
        night_end_hour=int(r["night_end_hour"]),
        daily_overtime_threshold_minutes=int(r["daily_overtime_threshold"]),
        weekly_overtime_threshold_minutes=int(r["weekly_overtime_threshold"]),
        is_active=bool(r["is_active"]),
        effective_from=normalize_mysql_date(r.get("effective_from")),
        effective_to=normalize_mysql_date(r.get("effective_to")),
    )


def _values(rate: PayRate) -> tuple:
    return (
        rate.base_rate,
        rate.night_rate,
        rate.weekend_rate,
        rate.bank_holiday_rate,
        rate.overtime_multiplier,
        rate.night_start_hour,
        rate.night_end_hour,
        rate.daily_overtime_threshold_minutes,
        rate.weekly_overtime_threshold_minutes,
        1 if rate.is_active else 0,
        rate.effective_from,
        rate.effective_to,
    )


class MySQLPayRateRepository(PayRateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_company(self, company_id: int) -> Sequence[PayRate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM pay_rates WHERE company_id=%s ORDER BY rate_id",
                (int(company_id),),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def get_by_id(self, rate_id: int) -> Optional[PayRate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM pay_rates WHERE rate_id=%s", (int(rate_id),))
            r = fetchone(cur)
            return _to_model(r) if r else None

    def create(self, rate: PayRate) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO pay_rates (
                    company_id, driver_id, base_rate, night_rate, weekend_rate,
                    bank_holiday_rate, overtime_multiplier, night_start_hour, night_end_hour,
                    daily_overtime_threshold, weekly_overtime_threshold, is_active,
                    effective_from, effective_to
                )
                VALUES (%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(rate.company_id), rate.driver_id) + _values(rate),
            )
            return int(cur.lastrowid)

    def update(self, rate: PayRate) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE pay_rates
                SET base_rate=%s, night_rate=%s, weekend_rate=%s, bank_holiday_rate=%s,
                    overtime_multiplier=%s, night_start_hour=%s, night_end_hour=%s,
                    daily_overtime_threshold=%s, weekly_overtime_threshold=%s, is_active=%s,
                    effective_from=%s, effective_to=%s
                WHERE rate_id=%s
                """,
                _values(rate) + (int(rate.rate_id),),
            )
            # MySQL reports 0 affected rows when nothing changed; check existence instead.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT rate_id FROM pay_rates WHERE rate_id=%s", (int(rate.rate_id),))
            return fetchone(cur) is not None

    def delete(self, *, rate_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM pay_rates WHERE rate_id=%s", (int(rate_id),))
            return cur.rowcount > 0

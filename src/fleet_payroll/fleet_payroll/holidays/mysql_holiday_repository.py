from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import BankHoliday
from .repository import BankHolidayRepository


class MySQLBankHolidayRepository(BankHolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_company(self, company_id: int) -> Sequence[BankHoliday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, company_id, name, holiday_date, is_recurring
                FROM bank_holidays
                WHERE company_id=%s
                ORDER BY holiday_date
                """,
                (int(company_id),),
            )
            return [
                BankHoliday(
                    holiday_id=int(r["holiday_id"]),
                    company_id=int(r["company_id"]),
                    name=r["name"],
                    holiday_date=normalize_mysql_date(r["holiday_date"]),
                    is_recurring=bool(r["is_recurring"]),
                )
                for r in fetchall(cur)
            ]

    def create(self, *, company_id: int, name: str, holiday_date: date, is_recurring: bool = False) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO bank_holidays (company_id, name, holiday_date, is_recurring)
                VALUES (%s,%s,%s,%s)
                """,
                (int(company_id), name, holiday_date, 1 if is_recurring else 0),
            )
            return int(cur.lastrowid)

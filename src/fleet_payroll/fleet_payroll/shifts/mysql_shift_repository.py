from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Shift
from .repository import ShiftRepository

_SELECT = """
    SELECT
        t.timesheet_id, t.company_id, t.driver_id, t.depot_id,
        t.arrival_time, t.departure_time,
        d.full_name AS driver_name,
        p.name AS depot_name
    FROM timesheets t
    LEFT JOIN drivers d ON d.driver_id = t.driver_id
    LEFT JOIN depots p ON p.depot_id = t.depot_id
"""


def _to_model(r: dict) -> Shift:
    return Shift(
        shift_id=int(r["timesheet_id"]),
        company_id=int(r["company_id"]),
        driver_id=int(r["driver_id"]),
        arrival_time=r["arrival_time"],
        departure_time=r.get("departure_time"),
        depot_id=int(r["depot_id"]) if r.get("depot_id") is not None else None,
        driver_name=r.get("driver_name"),
        depot_name=r.get("depot_name"),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE t.timesheet_id=%s", (int(shift_id),))
            r = fetchone(cur)
            return _to_model(r) if r else None

    def list_for_period(self, *, company_id: int, start: date, end: date) -> Sequence[Shift]:
        start_dt = datetime.combine(start, time.min)
        end_dt = datetime.combine(end + timedelta(days=1), time.min)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + """
                WHERE t.company_id=%s AND t.arrival_time >= %s AND t.arrival_time < %s
                ORDER BY t.arrival_time ASC, t.timesheet_id ASC
                """,
                (int(company_id), start_dt, end_dt),
            )
            return [_to_model(r) for r in fetchall(cur)]

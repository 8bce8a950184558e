from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Read-model: one driver timesheet (clock-in to clock-out).

    departure_time=None means the driver is still clocked in.
    """

    shift_id: Optional[int]
    company_id: int
    driver_id: int
    arrival_time: datetime
    departure_time: Optional[datetime] = None
    depot_id: Optional[int] = None
    driver_name: Optional[str] = None
    depot_name: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.departure_time is not None

    @property
    def total_minutes(self) -> int:
        """Clock difference in whole minutes.

        Naive timestamps are subtracted as wall-clock values; the wage engine
        recomputes minutes in its own timezone so DST changes count correctly.
        """
        if not self.departure_time:
            return 0
        return int((self.departure_time - self.arrival_time).total_seconds() // 60)

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def list_for_period(self, *, company_id: int, start: date, end: date) -> Sequence[Shift]:
        """Shifts whose arrival falls within [start, end], open ones included."""

        raise NotImplementedError

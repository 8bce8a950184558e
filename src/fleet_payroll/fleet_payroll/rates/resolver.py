from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.exceptions import ConfigurationError
from .model import PayRate
from .repository import PayRateRepository


def _latest(rates: Iterable[PayRate]) -> Optional[PayRate]:
    return max(rates, key=lambda r: (r.effective_from or date.min, r.rate_id), default=None)


class RateBook:
    """Immutable snapshot of one company's active rates.

    Built once per batch run and shared by every shift in it.
    """

    def __init__(self, company_id: int, rates: Sequence[PayRate]):
        self._company_id = int(company_id)
        self._rates = tuple(r for r in rates if r.company_id == self._company_id and r.is_active)
        if not any(r.is_default for r in self._rates):
            raise ConfigurationError(f"Company {self._company_id} has no active default pay rate")

    @property
    def company_id(self) -> int:
        return self._company_id

    def for_driver(self, driver_id: int, *, on: Optional[date] = None) -> PayRate:
        override = _latest(r for r in self._rates if r.driver_id == driver_id and r.applies_on(on))
        if override:
            return override

        default = _latest(r for r in self._rates if r.is_default and r.applies_on(on))
        if not default:
            raise ConfigurationError(
                f"Company {self._company_id} has no default pay rate effective on {on.isoformat() if on else 'any date'}"
            )
        return default


class RateResolver:
    """Driver override first, company default otherwise."""

    def __init__(self, rates: PayRateRepository):
        self._rates = rates

    def rate_book(self, company_id: int) -> RateBook:
        return RateBook(company_id, self._rates.list_for_company(int(company_id)))

    def resolve(self, company_id: int, driver_id: int, *, on: Optional[date] = None) -> PayRate:
        return self.rate_book(company_id).for_driver(int(driver_id), on=on)

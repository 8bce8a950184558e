from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayRate


class PayRateRepository(Protocol):
    def list_for_company(self, company_id: int) -> Sequence[PayRate]:
        """All rows of a company, active or not."""

        raise NotImplementedError

    def get_by_id(self, rate_id: int) -> Optional[PayRate]:
        raise NotImplementedError

    def create(self, rate: PayRate) -> int:
        """Insert a new row (rate.rate_id is ignored).

        Returns rate_id.
        """

        raise NotImplementedError

    def update(self, rate: PayRate) -> bool:
        raise NotImplementedError

    def delete(self, *, rate_id: int) -> bool:
        raise NotImplementedError

from __future__ import annotations

from abc import ABC, abstractmethod

from ...rates.model import PayRate
from ..model import BucketedMinutes, WageBreakdown


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for pricing bucketed minutes)."""

    @abstractmethod
    def calculate(self, bucketed: BucketedMinutes, rate: PayRate) -> WageBreakdown:
        raise NotImplementedError

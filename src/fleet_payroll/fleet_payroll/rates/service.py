from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.validators import require_decimal, require_hour, require_positive_int
from ..core import constants
from ..core.exceptions import ConfigurationError, NotFoundError, ValidationError
from .model import PayRate
from .repository import PayRateRepository

logger = logging.getLogger(__name__)

MONEY_FIELDS = ("base_rate", "night_rate", "weekend_rate", "bank_holiday_rate", "overtime_multiplier")
SETTING_FIELDS = (
    "night_start_hour",
    "night_end_hour",
    "daily_overtime_threshold_minutes",
    "weekly_overtime_threshold_minutes",
)
EDITABLE_FIELDS = MONEY_FIELDS + SETTING_FIELDS + ("is_active", "effective_from", "effective_to")


def _validated(rate: PayRate) -> PayRate:
    """Re-check every numeric field; returns the rate with normalized values."""
    values: dict[str, Any] = {}
    for name in MONEY_FIELDS:
        values[name] = require_decimal(getattr(rate, name), name)
    if values["overtime_multiplier"] < Decimal("1"):
        raise ValidationError("overtime_multiplier must be at least 1")

    values["night_start_hour"] = require_hour(rate.night_start_hour, "night_start_hour")
    values["night_end_hour"] = require_hour(rate.night_end_hour, "night_end_hour")
    values["daily_overtime_threshold_minutes"] = require_positive_int(
        rate.daily_overtime_threshold_minutes, "daily_overtime_threshold_minutes"
    )
    values["weekly_overtime_threshold_minutes"] = require_positive_int(
        rate.weekly_overtime_threshold_minutes, "weekly_overtime_threshold_minutes"
    )

    if rate.effective_from and rate.effective_to and rate.effective_to < rate.effective_from:
        raise ValidationError("effective_to must not be before effective_from")
    return replace(rate, **values)


class PayRateService:
    """Manager-facing lifecycle of pay rates.

    A company keeps exactly one active default row; it can be edited but never
    deleted. Driver overrides are created, edited and removed freely.
    """

    def __init__(self, rates: PayRateRepository):
        self._rates = rates

    def _company_rows(self, company_id: int) -> Sequence[PayRate]:
        return self._rates.list_for_company(require_positive_int(company_id, "companyId"))

    def _active_default(self, company_id: int) -> Optional[PayRate]:
        for r in self._company_rows(company_id):
            if r.is_default and r.is_active:
                return r
        return None

    def _override(self, company_id: int, driver_id: int) -> Optional[PayRate]:
        for r in self._company_rows(company_id):
            if r.driver_id == driver_id:
                return r
        return None

    def initialize_default(self, company_id: int) -> PayRate:
        existing = self._active_default(company_id)
        if existing:
            return existing

        rate = PayRate(
            rate_id=0,
            company_id=int(company_id),
            driver_id=None,
            base_rate=constants.DEFAULT_BASE_RATE,
            night_rate=constants.DEFAULT_NIGHT_RATE,
            weekend_rate=constants.DEFAULT_WEEKEND_RATE,
            bank_holiday_rate=constants.DEFAULT_BANK_HOLIDAY_RATE,
            overtime_multiplier=constants.DEFAULT_OVERTIME_MULTIPLIER,
            night_start_hour=constants.DEFAULT_NIGHT_START_HOUR,
            night_end_hour=constants.DEFAULT_NIGHT_END_HOUR,
            daily_overtime_threshold_minutes=constants.DEFAULT_DAILY_OVERTIME_THRESHOLD_MINUTES,
            weekly_overtime_threshold_minutes=constants.DEFAULT_WEEKLY_OVERTIME_THRESHOLD_MINUTES,
        )
        rate_id = self._rates.create(rate)
        logger.info("Default pay rate %s created for company %s", rate_id, company_id)
        return replace(rate, rate_id=rate_id)

    def list_for_company(self, company_id: int) -> list[PayRate]:
        rows = list(self._company_rows(company_id))
        rows.sort(key=lambda r: (not r.is_default, r.driver_id or 0, r.rate_id))
        return rows

    def set_driver_override(self, *, company_id: int, driver_id: int, **rates: Any) -> PayRate:
        """Create or update a driver's override.

        Keyword arguments are any of MONEY_FIELDS; omitted ones keep the
        override's current value (or the default's on create). Night window
        and thresholds are copied from the company default when the override
        is upserted. An upsert also reactivates the override with no date window.
        """
        company_id = require_positive_int(company_id, "companyId")
        driver_id = require_positive_int(driver_id, "driverId")
        unknown = set(rates) - set(MONEY_FIELDS)
        if unknown:
            raise ValidationError(f"Driver overrides only set rates, not: {', '.join(sorted(unknown))}")

        default = self._active_default(company_id)
        if not default:
            raise ConfigurationError(f"Company {company_id} has no default pay rate")

        changes = {k: v for k, v in rates.items() if v is not None}
        changes.update({name: getattr(default, name) for name in SETTING_FIELDS})
        changes.update(is_active=True, effective_from=None, effective_to=None)

        existing = self._override(company_id, driver_id)
        if existing:
            updated = _validated(replace(existing, **changes))
            self._rates.update(updated)
            logger.info("Pay rate override %s updated for driver %s", updated.rate_id, driver_id)
            return updated

        rate = _validated(
            replace(
                default,
                rate_id=0,
                driver_id=driver_id,
                **changes,
            )
        )
        rate_id = self._rates.create(rate)
        logger.info("Pay rate override %s created for driver %s (company %s)", rate_id, driver_id, company_id)
        return replace(rate, rate_id=rate_id)

    def update_rate(self, rate_id: int, changes: dict[str, Any]) -> PayRate:
        rate_id = require_positive_int(rate_id, "rateId")
        current = self._rates.get_by_id(rate_id)
        if not current:
            raise NotFoundError(f"Pay rate {rate_id} not found")

        forbidden = set(changes) - set(EDITABLE_FIELDS)
        if forbidden:
            raise ValidationError(f"Fields cannot be changed: {', '.join(sorted(forbidden))}")
        if current.is_default and changes.get("is_active") is False:
            raise ValidationError("The company default pay rate cannot be deactivated")

        updated = _validated(replace(current, **changes))
        if not self._rates.update(updated):
            raise NotFoundError(f"Pay rate {rate_id} not found")
        logger.info("Pay rate %s updated (%s)", rate_id, ", ".join(sorted(changes)))
        return updated

    def delete_driver_override(self, *, company_id: int, driver_id: int) -> None:
        driver_id = require_positive_int(driver_id, "driverId")
        existing = self._override(company_id, driver_id)
        if not existing:
            raise NotFoundError("No driver-specific pay rate found")

        self._rates.delete(rate_id=existing.rate_id)
        logger.info("Pay rate override %s deleted; driver %s reverts to the company default", existing.rate_id, driver_id)

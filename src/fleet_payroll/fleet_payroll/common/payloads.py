"""Versioned JSON records accepted from REST clients.

Every record is tagged: {"type": "<kind>", "version": 1, ...fields}. Field
names are camelCase as sent by the dashboards. Parsers return typed values or
raise ValidationError naming the offending field; nothing unvalidated gets
past this module.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Optional

from ..core.constants import PAYLOAD_SCHEMA_VERSION
from ..core.enums import PayloadType
from ..core.exceptions import ValidationError
from ..shifts.model import Shift
from .datetime_utils import parse_iso_date, parse_iso_datetime
from .validators import (
    require_decimal,
    require_hour,
    require_non_empty,
    require_positive_int,
)


def _envelope(payload: Any, expected: PayloadType) -> dict:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    tag = payload.get("type")
    if tag != expected.value:
        raise ValidationError(f"type must be {expected.value!r}, got {tag!r}")

    version = payload.get("version")
    if version != PAYLOAD_SCHEMA_VERSION:
        raise ValidationError(f"Unsupported {expected.value} version: {version!r}")
    return payload


def _bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def _date(value: Any, field_name: str) -> date:
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def _optional_date(value: Any, field_name: str) -> Optional[date]:
    return None if value is None else _date(value, field_name)


def _datetime(value: Any, field_name: str) -> datetime:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be an ISO-8601 timestamp")
    try:
        return parse_iso_datetime(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO-8601 timestamp")


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


# camelCase field -> (model attribute, parser)
PAY_RATE_FIELDS: dict[str, tuple[str, Callable[[Any, str], Any]]] = {
    "baseRate": ("base_rate", require_decimal),
    "nightRate": ("night_rate", require_decimal),
    "weekendRate": ("weekend_rate", require_decimal),
    "bankHolidayRate": ("bank_holiday_rate", require_decimal),
    "overtimeMultiplier": ("overtime_multiplier", require_decimal),
    "nightStartHour": ("night_start_hour", require_hour),
    "nightEndHour": ("night_end_hour", require_hour),
    "dailyOvertimeThresholdMinutes": ("daily_overtime_threshold_minutes", require_positive_int),
    "weeklyOvertimeThresholdMinutes": ("weekly_overtime_threshold_minutes", require_positive_int),
    "active": ("is_active", _bool),
    "effectiveFrom": ("effective_from", _optional_date),
    "effectiveTo": ("effective_to", _optional_date),
}

ENVELOPE_FIELDS = {"type", "version", "id", "companyId", "driverId"}


def parse_pay_rate_changes(payload: Any) -> dict[str, Any]:
    """Partial pay rate record (PATCH / override upsert) as model attributes."""
    body = _envelope(payload, PayloadType.PAY_RATE)

    unknown = set(body) - set(PAY_RATE_FIELDS) - ENVELOPE_FIELDS
    if unknown:
        raise ValidationError(f"Unknown pay rate fields: {', '.join(sorted(unknown))}")

    changes: dict[str, Any] = {}
    for key, (attr, parse) in PAY_RATE_FIELDS.items():
        if key in body:
            changes[attr] = parse(body[key], key)
    return changes


def parse_driver_override(payload: Any) -> tuple[int, int, dict[str, Any]]:
    body = _envelope(payload, PayloadType.PAY_RATE)
    company_id = require_positive_int(body.get("companyId"), "companyId")
    driver_id = require_positive_int(body.get("driverId"), "driverId")
    return company_id, driver_id, parse_pay_rate_changes(body)


def parse_bank_holiday(payload: Any) -> dict[str, Any]:
    body = _envelope(payload, PayloadType.BANK_HOLIDAY)
    return {
        "company_id": require_positive_int(body.get("companyId"), "companyId"),
        "name": require_non_empty(body.get("name") or "", "name"),
        "holiday_date": _date(body.get("date"), "date"),
        "is_recurring": _bool(body.get("isRecurring", False), "isRecurring"),
    }


def parse_shift(payload: Any) -> Shift:
    body = _envelope(payload, PayloadType.SHIFT)

    arrival = _datetime(body.get("arrivalTime"), "arrivalTime")
    departure_raw = body.get("departureTime")
    departure = None if departure_raw is None else _datetime(departure_raw, "departureTime")
    if departure is not None and (arrival.tzinfo is None) != (departure.tzinfo is None):
        raise ValidationError("arrivalTime and departureTime must both carry a UTC offset or neither")

    shift_id = body.get("id")
    depot_id = body.get("depotId")
    return Shift(
        shift_id=None if shift_id is None else require_positive_int(shift_id, "id"),
        company_id=require_positive_int(body.get("companyId"), "companyId"),
        driver_id=require_positive_int(body.get("driverId"), "driverId"),
        arrival_time=arrival,
        departure_time=departure,
        depot_id=None if depot_id is None else require_positive_int(depot_id, "depotId"),
        driver_name=_optional_text(body.get("driverName")),
        depot_name=_optional_text(body.get("depotName")),
    )


def parse_report_request(payload: Any) -> tuple[int, date, date]:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    for key in ("companyId", "startDate", "endDate"):
        if payload.get(key) in (None, ""):
            raise ValidationError("Missing companyId, startDate, or endDate")
    return (
        require_positive_int(payload["companyId"], "companyId"),
        _date(payload["startDate"], "startDate"),
        _date(payload["endDate"], "endDate"),
    )

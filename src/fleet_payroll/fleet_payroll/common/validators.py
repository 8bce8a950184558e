from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a positive integer")
    if number <= 0 or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} must be a positive integer")
    return number


def require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a non-negative integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a non-negative integer")
    if number < 0:
        raise ValidationError(f"{field_name} must be a non-negative integer")
    return number


def require_hour(value: Any, field_name: str) -> int:
    hour = require_non_negative_int(value, field_name)
    if hour > 23:
        raise ValidationError(f"{field_name} must be between 0 and 23")
    return hour


def require_decimal(value: Any, field_name: str, *, minimum: Decimal = Decimal("0")) -> Decimal:
    """Money and multipliers travel as strings ("12.50") or numbers.

    Floats go through str() so 12.1 stays 12.1 instead of its binary expansion.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a decimal number")
    if not number.is_finite():
        raise ValidationError(f"{field_name} must be a decimal number")
    if number < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum}")
    return number

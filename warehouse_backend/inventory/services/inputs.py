# inventory/services/inputs.py

"""
Business-level input checks shared by the engine services.

Request shape is validated by the API serializers; these guards re-check the
values the engine depends on so direct service callers get the same rules.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError

from catalog.codes import CONTAINER_SIZES


def to_decimal(value, *, field_name="value") -> Decimal:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be a valid decimal") from exc


def require_positive_int(value, *, field_name: str) -> int:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if number != value and str(number) != str(value).strip():
        raise ValidationError(f"{field_name} must be a whole number")
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return number


def require_positive_qty(value, *, field_name: str) -> Decimal:
    qty = to_decimal(value, field_name=field_name)
    if not qty.is_finite() or qty <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return qty


def require_container_size(value) -> int:
    size = require_positive_int(value, field_name="container_size")
    if size not in CONTAINER_SIZES:
        raise ValidationError(
            f"container_size must be one of {', '.join(str(s) for s in CONTAINER_SIZES)}"
        )
    return size


def require_family_code(value) -> str:
    code = (value or "").strip() if isinstance(value, str) else ""
    if not code:
        raise ValidationError("family_code is required")
    return code

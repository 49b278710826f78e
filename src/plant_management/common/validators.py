from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_int(value, field_name: str) -> int:
    """Accept ints, integral floats and digit strings ("-12" included). Booleans are rejected."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        raw = value.strip()
        digits = raw[1:] if raw.startswith("-") else raw
        if digits.isdigit():
            return int(raw)
    raise ValidationError(f"{field_name} must be an integer")


def require_non_negative(value, field_name: str) -> int:
    number = require_int(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number

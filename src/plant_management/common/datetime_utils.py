from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def parse_clock_time(value: Optional[str]) -> Optional[time]:
    """Parse HH:MM or HH:MM:SS into time. Empty values mean "not recorded"."""
    if value is None or not str(value).strip():
        return None

    raw = str(value).strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(raw, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time: {value!r} (expected HH:MM or HH:MM:SS)")


def format_clock_time(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M:%S") if value else None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it easier.
    """
    return date.today()

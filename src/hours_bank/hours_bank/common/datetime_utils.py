from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_REFERENCE_TIMEZONE
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Data inválida (AAAA-MM-DD): {value!r}")


def reference_tz(name: Optional[str] = None) -> tzinfo:
    return ZoneInfo(name or DEFAULT_REFERENCE_TIMEZONE)


def today_local(tz: tzinfo) -> date:
    """Current calendar date in the reference time zone."""
    return datetime.now(tz).date()


def to_reference_date(value: Any, tz: tzinfo) -> date:
    """Normalize a stored work date to a calendar date in ``tz``.

    Connectors and JSON payloads can hand us:
    - datetime.date
    - datetime.datetime (aware ones are converted to ``tz`` first)
    - string (e.g. '2025-03-01' or '2025-03-01T10:00:00+00:00')
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(tz).date()
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return parse_iso_date(text)
        try:
            return to_reference_date(datetime.fromisoformat(text), tz)
        except ValueError:
            raise ValidationError(f"Data inválida: {value!r}")

    raise TypeError(f"Unsupported work date value type: {type(value)!r}")

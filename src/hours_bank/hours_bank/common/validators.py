from __future__ import annotations

import math
from numbers import Real
from typing import Any

from ..core.exceptions import InvalidHoursError


def is_finite_hours(value: Any) -> bool:
    # bool is a Real subclass but never a valid amount of hours
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def require_finite_hours(value: Any) -> float:
    if not is_finite_hours(value):
        raise InvalidHoursError(f"Quantidade de horas inválida: {value!r}")
    return float(value)


def parse_hours(value: Any) -> float:
    """Parse a user supplied hours amount (number or numeric string)."""
    if isinstance(value, str):
        text = value.strip().replace(",", ".")
        try:
            value = float(text)
        except ValueError:
            raise InvalidHoursError(f"Quantidade de horas inválida: {text!r}")
    return require_finite_hours(value)

from __future__ import annotations


def format_hours(value: float) -> str:
    """Render an amount of hours as ``"8h 30m"`` (absolute value)."""
    total_minutes = int(round(abs(value) * 60))
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes:02d}m"


def format_signed_hours(value: float) -> str:
    sign = "+" if value >= 0 else "-"
    return f"{sign}{format_hours(value)}"

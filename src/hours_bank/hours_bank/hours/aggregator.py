"""Reduce work sessions into hour balances and fixed-length daily series.

Everything here is pure: no I/O, no clock. Callers pass the window anchor.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.validators import require_finite_hours
from ..core.constants import MONTH_WINDOW_DAYS, WEEK_WINDOW_DAYS, WEEKDAY_LABELS
from ..core.enums import BucketLabel
from ..core.exceptions import ValidationError
from .model import DailyBucket, HoursSummary, WorkSession


def _split(hours_values: Iterable[float]) -> tuple[float, float]:
    positive = 0.0
    negative = 0.0
    for value in hours_values:
        value = require_finite_hours(value)
        if value > 0:
            positive += value
        elif value < 0:
            negative += abs(value)
    return positive, negative


def summarize(sessions: Iterable[WorkSession]) -> HoursSummary:
    """Overall positive / negative / net balance of ``sessions``.

    Raises InvalidHoursError if any session carries a non-finite hours value.
    """
    positive, negative = _split(s.hours for s in sessions)
    return HoursSummary(positive=positive, negative=negative, total=positive - negative)


def bucket_label(day: date, labels: BucketLabel) -> str:
    if labels == BucketLabel.WEEKDAY:
        return WEEKDAY_LABELS[day.isoweekday() % 7]
    return str(day.day)


def bucket_by_window(
    sessions: Iterable[WorkSession],
    window_start: date,
    window_days: int,
    *,
    labels: BucketLabel = BucketLabel.DAY_OF_MONTH,
) -> list[DailyBucket]:
    """One bucket per calendar day of ``[window_start, window_start + window_days)``.

    Buckets are oldest first and never omitted: a day without sessions is a
    zero bucket. Sessions outside the window are ignored.
    """
    if window_days < 0:
        raise ValidationError("window_days must not be negative")

    window_end = window_start + timedelta(days=window_days)
    by_day: dict[date, list[float]] = {}
    for s in sessions:
        hours = require_finite_hours(s.hours)
        if window_start <= s.work_date < window_end:
            by_day.setdefault(s.work_date, []).append(hours)

    buckets: list[DailyBucket] = []
    for offset in range(window_days):
        day = window_start + timedelta(days=offset)
        positive, negative = _split(by_day.get(day, ()))
        buckets.append(DailyBucket(day=day, label=bucket_label(day, labels), positive=positive, negative=negative))
    return buckets


def week_window(today: date) -> tuple[date, int]:
    """Sunday-first calendar week containing ``today``."""
    start = today - timedelta(days=today.isoweekday() % 7)
    return start, WEEK_WINDOW_DAYS


def rolling_window(today: date, days: int = MONTH_WINDOW_DAYS) -> tuple[date, int]:
    """The ``days`` calendar days ending on ``today`` (inclusive)."""
    if days <= 0:
        raise ValidationError("days must be positive")
    return today - timedelta(days=days - 1), days


def sum_buckets(buckets: Sequence[DailyBucket]) -> HoursSummary:
    positive = sum(b.positive for b in buckets)
    negative = sum(b.negative for b in buckets)
    return HoursSummary(positive=positive, negative=negative, total=positive - negative)

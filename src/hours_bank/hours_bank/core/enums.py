from __future__ import annotations

from enum import Enum


class HourType(str, Enum):
    """Direction of a manual hour entry: extra hours (credit) or owed hours (debit)."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


class BucketLabel(str, Enum):
    """How each daily bucket of a series is labelled."""

    WEEKDAY = "weekday"
    DAY_OF_MONTH = "day_of_month"


class SeriesView(str, Enum):
    WEEK = "week"
    MONTH = "month"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveType(str, Enum):
    """Kind of day off an employee asks for."""

    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    EMERGENCY = "emergency"

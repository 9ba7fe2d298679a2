from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class WorkSession:
    """A signed adjustment to an employee's hour balance on one calendar day.

    Positive ``hours`` are credit (overtime), negative ones are debit.
    """

    employee_id: int
    work_date: date
    hours: float
    session_id: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class WorkSessionListItem:
    """Read-model for the hour entry screen (session joined with its employee)."""

    session: WorkSession
    full_name: str
    email: str
    department: Optional[str] = None
    position: Optional[str] = None


@dataclass(frozen=True)
class HoursSummary:
    positive: float = 0.0
    negative: float = 0.0
    total: float = 0.0

    @property
    def is_positive(self) -> bool:
        return self.total >= 0

    @property
    def progress_percent(self) -> float:
        # Month status bar: 10% per hour of balance, capped.
        return min(abs(self.total) * 10, 100.0)


@dataclass(frozen=True)
class DailyBucket:
    day: date
    label: str
    positive: float = 0.0
    negative: float = 0.0

    @property
    def short_date(self) -> str:
        return self.day.strftime("%d/%m")

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.formatting import format_hours, format_signed_hours
from ..common.validators import is_finite_hours
from ..core.enums import BucketLabel, SeriesView
from ..core.exceptions import SessionStoreError
from .aggregator import bucket_by_window, rolling_window, sum_buckets, summarize, week_window
from .model import DailyBucket, HoursSummary, WorkSession
from .repository import WorkSessionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoursDashboard:
    employee_id: int
    view: SeriesView
    today: date
    summary: HoursSummary
    window_summary: HoursSummary
    series: list[DailyBucket]

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "view": self.view.value,
            "today": self.today.isoformat(),
            "summary": {
                "positive": self.summary.positive,
                "negative": self.summary.negative,
                "total": self.summary.total,
                "is_positive": self.summary.is_positive,
                "progress_percent": self.summary.progress_percent,
                "positive_text": format_hours(self.summary.positive),
                "negative_text": format_hours(self.summary.negative),
                "total_text": format_signed_hours(self.summary.total),
            },
            "window_summary": {
                "positive": self.window_summary.positive,
                "negative": self.window_summary.negative,
                "total": self.window_summary.total,
            },
            "series": [
                {
                    "date": b.day.isoformat(),
                    "short_date": b.short_date,
                    "label": b.label,
                    "positive": b.positive,
                    "negative": b.negative,
                }
                for b in self.series
            ],
        }


class HoursBalanceService:
    """Loads an employee's work sessions and aggregates them for display.

    Store failures never reach the caller: an unreadable store is an empty
    balance, same as an employee with no sessions.
    """

    def __init__(
        self,
        sessions: WorkSessionRepository,
        *,
        tz: tzinfo,
        clock: Optional[Callable[[], date]] = None,
    ):
        self._sessions = sessions
        self._tz = tz
        self._clock = clock or (lambda: today_local(tz))

    def load_sessions(self, employee_id: int) -> list[WorkSession]:
        try:
            rows = self._sessions.fetch_sessions(int(employee_id))
        except SessionStoreError:
            logger.exception("Could not load work sessions for employee %s", employee_id)
            return []

        if rows is None:
            logger.warning("Session store returned nothing for employee %s", employee_id)
            return []

        valid: list[WorkSession] = []
        for s in rows:
            if not is_finite_hours(s.hours) or s.work_date is None:
                logger.warning("Dropping malformed work session %s for employee %s", s.session_id, employee_id)
                continue
            valid.append(s)
        return valid

    def get_summary(self, employee_id: int) -> HoursSummary:
        return summarize(self.load_sessions(employee_id))

    @staticmethod
    def build_series(sessions: Sequence[WorkSession], view: SeriesView, today: date) -> list[DailyBucket]:
        if view == SeriesView.WEEK:
            start, days = week_window(today)
            return bucket_by_window(sessions, start, days, labels=BucketLabel.WEEKDAY)
        start, days = rolling_window(today)
        return bucket_by_window(sessions, start, days, labels=BucketLabel.DAY_OF_MONTH)

    def get_series(
        self,
        employee_id: int,
        view: SeriesView = SeriesView.MONTH,
        today: Optional[date] = None,
    ) -> list[DailyBucket]:
        return self.build_series(self.load_sessions(employee_id), view, today or self._clock())

    def get_dashboard(
        self,
        employee_id: int,
        view: SeriesView = SeriesView.MONTH,
        today: Optional[date] = None,
    ) -> HoursDashboard:
        today = today or self._clock()
        sessions = self.load_sessions(employee_id)
        series = self.build_series(sessions, view, today)
        return HoursDashboard(
            employee_id=int(employee_id),
            view=view,
            today=today,
            summary=summarize(sessions),
            window_summary=sum_buckets(series),
            series=series,
        )

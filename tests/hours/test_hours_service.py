from __future__ import annotations

import logging
import math
from datetime import date

from src.hours_bank.hours_bank.core.enums import SeriesView
from src.hours_bank.hours_bank.core.exceptions import SessionStoreError
from src.hours_bank.hours_bank.hours.model import HoursSummary, WorkSession
from src.hours_bank.hours_bank.hours.service import HoursBalanceService


class FailingStore:
    def fetch_sessions(self, employee_id):
        raise SessionStoreError("connection refused")


class NoneStore:
    def fetch_sessions(self, employee_id):
        return None


class FixedStore:
    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    def fetch_sessions(self, employee_id):
        self.calls.append(employee_id)
        return self.rows


def test_summary_only_counts_the_requested_employee(session_repo, tz):
    session_repo.create(employee_id=1, work_date=date(2025, 3, 10), hours=8)
    session_repo.create(employee_id=1, work_date=date(2025, 3, 10), hours=-2)
    session_repo.create(employee_id=2, work_date=date(2025, 3, 10), hours=100)

    svc = HoursBalanceService(session_repo, tz=tz)

    assert svc.get_summary(1) == HoursSummary(positive=8, negative=2, total=6)


def test_store_failure_is_an_empty_balance(tz, fixed_today, caplog):
    svc = HoursBalanceService(FailingStore(), tz=tz)

    with caplog.at_level(logging.ERROR):
        dashboard = svc.get_dashboard(1, SeriesView.MONTH, fixed_today)

    assert dashboard.summary == HoursSummary(0, 0, 0)
    assert len(dashboard.series) == 30
    assert all(b.positive == 0 and b.negative == 0 for b in dashboard.series)
    assert "Could not load work sessions" in caplog.text


def test_missing_store_result_is_an_empty_balance(tz):
    svc = HoursBalanceService(NoneStore(), tz=tz)

    assert svc.get_summary(7) == HoursSummary(0, 0, 0)


def test_malformed_rows_are_dropped_before_aggregation(tz, caplog):
    store = FixedStore(
        [
            WorkSession(employee_id=1, work_date=date(2025, 3, 10), hours=3, session_id=1),
            WorkSession(employee_id=1, work_date=date(2025, 3, 10), hours=math.nan, session_id=2),
        ]
    )
    svc = HoursBalanceService(store, tz=tz)

    with caplog.at_level(logging.WARNING):
        summary = svc.get_summary(1)

    assert summary == HoursSummary(positive=3, negative=0, total=3)
    assert "Dropping malformed work session 2" in caplog.text


def test_week_series_uses_weekday_labels(session_repo, tz, fixed_today):
    session_repo.create(employee_id=1, work_date=date(2025, 3, 10), hours=2)
    session_repo.create(employee_id=1, work_date=date(2025, 3, 14), hours=-1)
    svc = HoursBalanceService(session_repo, tz=tz)

    series = svc.get_series(1, SeriesView.WEEK, fixed_today)

    assert [b.label for b in series] == ["Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb"]
    assert series[1].positive == 2
    assert series[5].negative == 1


def test_month_series_defaults_to_clock(session_repo, tz):
    session_repo.create(employee_id=1, work_date=date(2025, 3, 12), hours=1)
    svc = HoursBalanceService(session_repo, tz=tz, clock=lambda: date(2025, 3, 12))

    series = svc.get_series(1)

    assert len(series) == 30
    assert series[-1].day == date(2025, 3, 12)
    assert series[-1].label == "12"
    assert series[-1].positive == 1


def test_dashboard_window_summary_only_covers_the_series(session_repo, tz, fixed_today):
    session_repo.create(employee_id=1, work_date=date(2025, 1, 2), hours=10)
    session_repo.create(employee_id=1, work_date=date(2025, 3, 11), hours=-3)
    svc = HoursBalanceService(session_repo, tz=tz)

    dashboard = svc.get_dashboard(1, SeriesView.MONTH, fixed_today)

    assert dashboard.summary == HoursSummary(positive=10, negative=3, total=7)
    assert dashboard.window_summary == HoursSummary(positive=0, negative=3, total=-3)


def test_dashboard_to_dict_formats_hours(session_repo, tz, fixed_today):
    session_repo.create(employee_id=1, work_date=date(2025, 3, 11), hours=8.5)
    session_repo.create(employee_id=1, work_date=date(2025, 3, 11), hours=-0.25)
    svc = HoursBalanceService(session_repo, tz=tz)

    data = svc.get_dashboard(1, SeriesView.WEEK, fixed_today).to_dict()

    assert data["view"] == "week"
    assert data["today"] == "2025-03-12"
    assert data["summary"]["positive_text"] == "8h 30m"
    assert data["summary"]["negative_text"] == "0h 15m"
    assert data["summary"]["total_text"] == "+8h 15m"
    assert data["summary"]["is_positive"] is True
    assert data["series"][2] == {
        "date": "2025-03-11",
        "short_date": "11/03",
        "label": "Ter",
        "positive": 8.5,
        "negative": 0.25,
    }


def test_dashboard_reads_store_once(tz, fixed_today):
    store = FixedStore([])
    HoursBalanceService(store, tz=tz).get_dashboard(5, SeriesView.WEEK, fixed_today)

    assert store.calls == [5]

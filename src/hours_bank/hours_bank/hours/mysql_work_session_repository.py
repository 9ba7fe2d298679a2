from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Any, Optional, Sequence

import mysql.connector

from ..common.datetime_utils import to_reference_date
from ..common.validators import is_finite_hours
from ..core.constants import DAILY_OVERTIME_THRESHOLD
from ..core.exceptions import SessionStoreError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import WorkSession, WorkSessionListItem
from .repository import WorkSessionRepository

logger = logging.getLogger(__name__)

_SESSION_COLUMNS = "ws.session_id, ws.employee_id, ws.work_date, ws.total_hours, ws.notes, ws.created_at"


class MySQLWorkSessionRepository(WorkSessionRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tz: tzinfo):
        self._conn_factory = conn_factory
        self._tz = tz

    def _to_session(self, r: dict[str, Any]) -> Optional[WorkSession]:
        try:
            hours = r.get("total_hours")
            hours = float(hours) if hours is not None else None
            if r.get("work_date") is None or not is_finite_hours(hours):
                raise ValueError("missing work_date or hours")
            return WorkSession(
                session_id=int(r["session_id"]),
                employee_id=int(r["employee_id"]),
                work_date=to_reference_date(r["work_date"], self._tz),
                hours=hours,
                notes=r.get("notes"),
                created_at=r.get("created_at"),
            )
        except (ValueError, TypeError, ValidationError):
            logger.warning(
                "Skipping malformed work session %s (work_date=%r, hours=%r)",
                r.get("session_id"), r.get("work_date"), r.get("total_hours"),
            )
            return None

    def fetch_sessions(self, employee_id: int) -> Sequence[WorkSession]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"SELECT {_SESSION_COLUMNS} FROM work_sessions ws WHERE ws.employee_id=%s",
                    (int(employee_id),),
                )
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            raise SessionStoreError(f"Could not load work sessions for employee {employee_id}: {e}") from e
        return [s for s in (self._to_session(r) for r in rows) if s is not None]

    def get_by_id(self, session_id: int) -> Optional[WorkSession]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"SELECT {_SESSION_COLUMNS} FROM work_sessions ws WHERE ws.session_id=%s",
                    (int(session_id),),
                )
                r = fetchone(cur)
        except mysql.connector.Error as e:
            raise SessionStoreError(f"Could not load work session {session_id}: {e}") from e
        return self._to_session(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        hours: float,
        notes: Optional[str] = None,
    ) -> int:
        overtime = max(hours - DAILY_OVERTIME_THRESHOLD, 0.0)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO work_sessions(employee_id, work_date, total_hours, overtime_hours, notes, status)
                    VALUES(%s,%s,%s,%s,%s,'completed')
                    """,
                    (int(employee_id), work_date, hours, overtime, notes),
                )
                return int(cur.lastrowid)
        except mysql.connector.Error as e:
            raise SessionStoreError(f"Could not save work session: {e}") from e

    def update(self, *, session_id: int, work_date: date, hours: float) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE work_sessions
                    SET work_date=%s, total_hours=%s, overtime_hours=%s
                    WHERE session_id=%s
                    """,
                    (work_date, hours, max(hours - DAILY_OVERTIME_THRESHOLD, 0.0), int(session_id)),
                )
                return cur.rowcount > 0
        except mysql.connector.Error as e:
            raise SessionStoreError(f"Could not update work session {session_id}: {e}") from e

    def delete(self, session_id: int) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM work_sessions WHERE session_id=%s", (int(session_id),))
                return cur.rowcount > 0
        except mysql.connector.Error as e:
            raise SessionStoreError(f"Could not delete work session {session_id}: {e}") from e

    def list_recent(self, limit: int) -> Sequence[WorkSessionListItem]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    SELECT {_SESSION_COLUMNS}, e.full_name, e.email, e.department, e.position
                    FROM work_sessions ws
                    INNER JOIN employees e ON e.employee_id = ws.employee_id
                    ORDER BY ws.created_at DESC, ws.session_id DESC
                    LIMIT %s
                    """,
                    (int(limit),),
                )
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            raise SessionStoreError(f"Could not list work sessions: {e}") from e

        items: list[WorkSessionListItem] = []
        for r in rows:
            session = self._to_session(r)
            if session is None:
                continue
            items.append(
                WorkSessionListItem(
                    session=session,
                    full_name=r["full_name"],
                    email=r["email"],
                    department=r.get("department"),
                    position=r.get("position"),
                )
            )
        return items

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import WorkSession, WorkSessionListItem


class WorkSessionRepository(Protocol):
    def fetch_sessions(self, employee_id: int) -> Sequence[WorkSession]:
        """All sessions of one employee, in no particular order."""

        raise NotImplementedError

    def get_by_id(self, session_id: int) -> Optional[WorkSession]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        hours: float,
        notes: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update(self, *, session_id: int, work_date: date, hours: float) -> bool:
        raise NotImplementedError

    def delete(self, session_id: int) -> bool:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[WorkSessionListItem]:
        raise NotImplementedError

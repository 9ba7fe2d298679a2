from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.validators import parse_hours
from ..core.constants import DEFAULT_RECENT_ENTRIES
from ..core.enums import HourType
from ..core.exceptions import InvalidHoursError, NotFoundError, ValidationError
from ..employees.service import EmployeeService, matches_search
from .model import WorkSessionListItem
from .repository import WorkSessionRepository

logger = logging.getLogger(__name__)


class HourEntryService:
    """Manual hour launches done by administrators."""

    def __init__(self, sessions: WorkSessionRepository, employees: EmployeeService):
        self._sessions = sessions
        self._employees = employees

    @staticmethod
    def _parse_hour_type(value: Any) -> HourType:
        try:
            return HourType(value)
        except ValueError:
            raise ValidationError("Tipo de hora inválido (positive/negative)")

    def _signed_hours(self, hours: Any, hour_type: Any) -> float:
        amount = parse_hours(hours)
        if amount <= 0:
            raise InvalidHoursError("Informe uma quantidade de horas maior que zero")
        kind = self._parse_hour_type(hour_type)
        return -amount if kind == HourType.NEGATIVE else amount

    def record_entry(
        self,
        *,
        employee_id: int,
        work_date: date,
        hours: Any,
        hour_type: Any = HourType.POSITIVE,
        notes: Optional[str] = None,
    ) -> int:
        signed = self._signed_hours(hours, hour_type)
        employee = self._employees.get_active(employee_id)

        session_id = self._sessions.create(
            employee_id=employee.employee_id,
            work_date=work_date,
            hours=signed,
            notes=(notes or "").strip() or None,
        )
        logger.info("Recorded %+.2fh for employee %s on %s (session %s)", signed, employee.employee_id, work_date, session_id)
        return session_id

    def update_entry(
        self,
        *,
        session_id: int,
        work_date: date,
        hours: Any,
        hour_type: Any = HourType.POSITIVE,
    ) -> None:
        signed = self._signed_hours(hours, hour_type)
        if not self._sessions.get_by_id(int(session_id)):
            raise NotFoundError("Registro não encontrado")
        self._sessions.update(session_id=int(session_id), work_date=work_date, hours=signed)
        logger.info("Updated work session %s to %+.2fh on %s", session_id, signed, work_date)

    def delete_entry(self, session_id: int) -> None:
        if not self._sessions.delete(int(session_id)):
            raise NotFoundError("Registro não encontrado")
        logger.info("Deleted work session %s", session_id)

    def list_recent(self, *, search: str = "", limit: int = DEFAULT_RECENT_ENTRIES) -> Sequence[WorkSessionListItem]:
        if limit <= 0:
            raise ValidationError("limit must be positive")
        items = self._sessions.list_recent(int(limit))
        return [i for i in items if matches_search(search, i.full_name, i.email)]

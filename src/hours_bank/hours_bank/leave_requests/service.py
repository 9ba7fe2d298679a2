from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..core.constants import DEFAULT_LEAVE_REQUEST_LIMIT
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService, matches_search
from .model import LeaveRequest
from .repository import LeaveRequestRepository

logger = logging.getLogger(__name__)

# Filter values that mean "no status filter"
_ALL_STATUSES = {"", "todos", "all"}


def parse_status_filter(value: Any) -> Optional[LeaveStatus]:
    if value is None or isinstance(value, LeaveStatus):
        return value
    raw = str(value).strip().lower()
    if raw in _ALL_STATUSES:
        return None
    try:
        return LeaveStatus(raw)
    except ValueError:
        raise ValidationError("Status inválido (pending/approved/rejected)")


class LeaveRequestService:
    """Day-off requests: submitted for an employee, then approved or rejected once."""

    def __init__(self, requests: LeaveRequestRepository, employees: EmployeeService):
        self._requests = requests
        self._employees = employees

    def create_request(
        self,
        *,
        employee_id: Any,
        start_date: Optional[date],
        end_date: Optional[date],
        leave_type: Any,
        reason: Optional[str] = None,
    ) -> int:
        if not employee_id or not start_date or not end_date or not leave_type:
            raise ValidationError("Por favor, preencha todos os campos obrigatórios")

        try:
            employee_id = int(employee_id)
        except (TypeError, ValueError):
            raise ValidationError("Selecione um funcionário")

        try:
            kind = LeaveType(leave_type)
        except ValueError:
            raise ValidationError("Tipo de folga inválido")

        if end_date < start_date:
            raise ValidationError("A data final deve ser igual ou posterior à data inicial")

        employee = self._employees.get_active(employee_id)
        request_id = self._requests.create(
            employee_id=employee.employee_id,
            start_date=start_date,
            end_date=end_date,
            leave_type=kind,
            reason=(reason or "").strip() or None,
        )
        logger.info(
            "Leave request %s created for employee %s (%s, %s..%s)",
            request_id, employee.employee_id, kind.value, start_date, end_date,
        )
        return request_id

    def list_requests(
        self,
        *,
        status: Any = None,
        search: str = "",
        limit: int = DEFAULT_LEAVE_REQUEST_LIMIT,
    ) -> Sequence[LeaveRequest]:
        if limit <= 0:
            raise ValidationError("limit must be positive")
        items = self._requests.list_requests(status=parse_status_filter(status), limit=int(limit))
        return [r for r in items if matches_search(search, r.employee_name, r.badge)]

    def approve(self, request_id: int) -> None:
        self._decide(request_id, LeaveStatus.APPROVED)

    def reject(self, request_id: int) -> None:
        self._decide(request_id, LeaveStatus.REJECTED)

    def _decide(self, request_id: int, status: LeaveStatus) -> None:
        req = self._requests.get_by_id(int(request_id))
        if not req:
            raise NotFoundError("Solicitação não encontrada")
        if req.status != LeaveStatus.PENDING:
            raise ValidationError("Solicitação já foi processada")

        if not self._requests.decide(request_id=int(request_id), status=status):
            raise ValidationError("Solicitação já foi processada")
        logger.info("Leave request %s %s", request_id, status.value)

    def delete(self, request_id: int) -> None:
        if not self._requests.delete(int(request_id)):
            raise NotFoundError("Solicitação não encontrada")
        logger.info("Deleted leave request %s", request_id)

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveRequest


class LeaveRequestRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: LeaveType,
        reason: Optional[str],
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_requests(self, *, status: Optional[LeaveStatus] = None, limit: int = 200) -> Sequence[LeaveRequest]:
        """Newest first, joined with the employee name and badge."""
        raise NotImplementedError

    def decide(self, *, request_id: int, status: LeaveStatus) -> bool:
        """Move a pending request to ``status``; False when it was not pending."""
        raise NotImplementedError

    def delete(self, request_id: int) -> bool:
        raise NotImplementedError

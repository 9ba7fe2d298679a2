from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import LEAVE_STATUS_LABELS, LEAVE_TYPE_LABELS
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    leave_type: LeaveType
    status: LeaveStatus
    reason: Optional[str] = None
    created_at: Optional[datetime] = None
    decided_at: Optional[datetime] = None
    # Joined from employees for listing
    employee_name: str = ""
    badge: str = ""

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "badge": self.badge,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "days": self.days,
            "leave_type": self.leave_type.value,
            "leave_type_label": LEAVE_TYPE_LABELS[self.leave_type.value],
            "reason": self.reason or "",
            "status": self.status.value,
            "status_label": LEAVE_STATUS_LABELS[self.status.value],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "decided_at": self.decided_at.isoformat() if self.decided_at else None,
        }

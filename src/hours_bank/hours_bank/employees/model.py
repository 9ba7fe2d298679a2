from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    employee_id: int
    badge: str
    full_name: str
    email: str
    department: Optional[str] = None
    position: Optional[str] = None
    is_active: bool = True
    shift: Optional[str] = None
    supervisor: Optional[str] = None
    leader_shift: Optional[str] = None

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.full_name.split() if part)[:2].upper()

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "badge": self.badge,
            "full_name": self.full_name,
            "initials": self.initials,
            "email": self.email,
            "department": self.department,
            "position": self.position,
            "shift": self.shift,
            "supervisor": self.supervisor,
            "leader_shift": self.leader_shift,
            "is_active": self.is_active,
        }

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from src.hours_bank.hours_bank.core.enums import LeaveStatus, LeaveType
from src.hours_bank.hours_bank.employees.model import Employee
from src.hours_bank.hours_bank.hours.model import WorkSession, WorkSessionListItem
from src.hours_bank.hours_bank.leave_requests.model import LeaveRequest


class InMemoryWorkSessions:
    def __init__(self, sessions=()):
        self._rows: dict[int, WorkSession] = {}
        self._next_id = 1
        self._tick = 0
        self.employees: dict[int, Employee] = {}
        for s in sessions:
            self.add(s)

    def add(self, s: WorkSession) -> int:
        sid = s.session_id or self._next_id
        self._next_id = max(self._next_id, sid) + 1
        self._tick += 1
        self._rows[sid] = WorkSession(
            session_id=sid,
            employee_id=s.employee_id,
            work_date=s.work_date,
            hours=s.hours,
            notes=s.notes,
            created_at=s.created_at or datetime(2025, 3, 1, 8, 0, self._tick % 60),
        )
        return sid

    def fetch_sessions(self, employee_id: int):
        return [s for s in self._rows.values() if s.employee_id == employee_id]

    def get_by_id(self, session_id: int) -> Optional[WorkSession]:
        return self._rows.get(int(session_id))

    def create(self, *, employee_id, work_date, hours, notes=None) -> int:
        return self.add(WorkSession(employee_id=employee_id, work_date=work_date, hours=hours, notes=notes))

    def update(self, *, session_id, work_date, hours) -> bool:
        old = self._rows.get(int(session_id))
        if not old:
            return False
        self._rows[old.session_id] = WorkSession(
            session_id=old.session_id,
            employee_id=old.employee_id,
            work_date=work_date,
            hours=hours,
            notes=old.notes,
            created_at=old.created_at,
        )
        return True

    def delete(self, session_id) -> bool:
        return self._rows.pop(int(session_id), None) is not None

    def list_recent(self, limit: int):
        rows = sorted(self._rows.values(), key=lambda s: (s.created_at, s.session_id), reverse=True)
        items = []
        for s in rows[:limit]:
            emp = self.employees.get(s.employee_id)
            items.append(
                WorkSessionListItem(
                    session=s,
                    full_name=emp.full_name if emp else "?",
                    email=emp.email if emp else "",
                    department=emp.department if emp else None,
                    position=emp.position if emp else None,
                )
            )
        return items


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def get_by_badge(self, badge: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.badge == badge), None)

    def list_active(self):
        return sorted((e for e in self._by_id.values() if e.is_active), key=lambda e: e.full_name)

    def deactivate(self, employee_id: int) -> bool:
        emp = self._by_id.get(int(employee_id))
        if not emp or not emp.is_active:
            return False
        self._by_id[emp.employee_id] = replace(emp, is_active=False)
        return True


class InMemoryLeaveRequests:
    def __init__(self, employees=()):
        self._rows: dict[int, LeaveRequest] = {}
        self._next_id = 1
        self.employees: dict[int, Employee] = {e.employee_id: e for e in employees}

    def create(self, *, employee_id, start_date, end_date, leave_type, reason=None, status=LeaveStatus.PENDING) -> int:
        rid = self._next_id
        self._next_id += 1
        emp = self.employees.get(employee_id)
        self._rows[rid] = LeaveRequest(
            request_id=rid,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            leave_type=LeaveType(leave_type),
            status=status,
            reason=reason,
            created_at=datetime(2025, 3, 1, 8, 0, rid % 60),
            employee_name=emp.full_name if emp else "",
            badge=emp.badge if emp else "",
        )
        return rid

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        return self._rows.get(int(request_id))

    def list_requests(self, *, status=None, limit=200):
        rows = sorted(self._rows.values(), key=lambda r: (r.created_at, r.request_id), reverse=True)
        return [r for r in rows if status is None or r.status == status][:limit]

    def decide(self, *, request_id, status) -> bool:
        old = self._rows.get(int(request_id))
        if not old or old.status != LeaveStatus.PENDING:
            return False
        self._rows[old.request_id] = replace(old, status=status, decided_at=datetime(2025, 3, 2, 9, 0))
        return True

    def delete(self, request_id) -> bool:
        return self._rows.pop(int(request_id), None) is not None


@pytest.fixture
def tz():
    return ZoneInfo("America/Sao_Paulo")


@pytest.fixture
def fixed_today() -> date:
    # A Wednesday; its Sunday-first week starts on 2025-03-09.
    return date(2025, 3, 12)


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee(employee_id=1, badge="123456", full_name="Ana Souza", email="ana.souza@example.com",
                 department="Produção", position="Operadora", shift="1º Turno", supervisor="Carlos Lima"),
        Employee(employee_id=2, badge="654321", full_name="Bruno Alves", email="bruno.alves@example.com",
                 department="Logística", position="Conferente"),
        Employee(employee_id=3, badge="111111", full_name="Carla Dias", email="carla@example.com", is_active=False),
    ]


@pytest.fixture
def employee_repo(employees) -> InMemoryEmployees:
    return InMemoryEmployees(employees)


@pytest.fixture
def session_repo(employees) -> InMemoryWorkSessions:
    repo = InMemoryWorkSessions()
    repo.employees = {e.employee_id: e for e in employees}
    return repo


@pytest.fixture
def leave_repo(employees) -> InMemoryLeaveRequests:
    return InMemoryLeaveRequests(employees)

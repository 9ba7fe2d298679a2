from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = (
    "employee_id, badge, full_name, email, department, position, is_active, shift, supervisor, leader_shift"
)


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        badge=str(r["badge"]),
        full_name=r["full_name"],
        email=r["email"],
        department=r.get("department"),
        position=r.get("position"),
        is_active=bool(r.get("is_active", 1)),
        shift=r.get("shift"),
        supervisor=r.get("supervisor"),
        leader_shift=r.get("leader_shift"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_badge(self, badge: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE badge=%s", (badge,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE is_active=1 ORDER BY full_name")
            return [_to_employee(r) for r in fetchall(cur)]

    def deactivate(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=0 WHERE employee_id=%s AND is_active=1",
                (int(employee_id),),
            )
            return cur.rowcount > 0

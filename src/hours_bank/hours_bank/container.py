from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .hours.entry_service import HourEntryService
from .hours.mysql_work_session_repository import MySQLWorkSessionRepository
from .hours.service import HoursBalanceService
from .leave_requests.mysql_leave_request_repository import MySQLLeaveRequestRepository
from .leave_requests.service import LeaveRequestService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    work_sessions_repo: MySQLWorkSessionRepository
    leave_requests_repo: MySQLLeaveRequestRepository

    employee_service: EmployeeService
    hours_service: HoursBalanceService
    entry_service: HourEntryService
    leave_request_service: LeaveRequestService


def build_container(*, db_config: dict, tz: tzinfo) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    work_sessions_repo = MySQLWorkSessionRepository(conn, tz=tz)
    leave_requests_repo = MySQLLeaveRequestRepository(conn)

    employee_service = EmployeeService(employees_repo)
    hours_service = HoursBalanceService(work_sessions_repo, tz=tz)
    entry_service = HourEntryService(work_sessions_repo, employee_service)
    leave_request_service = LeaveRequestService(leave_requests_repo, employee_service)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        work_sessions_repo=work_sessions_repo,
        leave_requests_repo=leave_requests_repo,
        employee_service=employee_service,
        hours_service=hours_service,
        entry_service=entry_service,
        leave_request_service=leave_request_service,
    )

from __future__ import annotations

import logging
import re
from typing import Sequence

from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def matches_search(term: str, *fields: str | None) -> bool:
    """Case-insensitive substring match of ``term`` against any of ``fields``."""
    needle = (term or "").strip().lower()
    if not needle:
        return True
    return any(needle in (f or "").lower() for f in fields)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def identify_by_badge(self, raw_badge: str) -> Employee:
        badge = re.sub(r"\D", "", raw_badge or "")
        if not badge:
            raise ValidationError("Por favor, insira o número do crachá")

        employee = self._employees.get_by_badge(badge)
        if not employee or not employee.is_active:
            raise NotFoundError("Crachá não encontrado")
        return employee

    def get_active(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee or not employee.is_active:
            raise NotFoundError("Funcionário não encontrado")
        return employee

    def search(self, term: str = "") -> Sequence[Employee]:
        return [e for e in self._employees.list_active() if matches_search(term, e.full_name, e.email)]

    def deactivate(self, employee_id: int) -> None:
        if not self._employees.deactivate(int(employee_id)):
            raise NotFoundError("Funcionário não encontrado")
        logger.info("Deactivated employee %s", employee_id)

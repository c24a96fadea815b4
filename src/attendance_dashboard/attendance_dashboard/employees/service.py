from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_int_id, require_min_length, require_non_empty
from ..core.enums import ShiftType
from ..core.exceptions import NotFoundError, UnknownEmployeeError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: browse the roster, add and delete employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees.list_all())

    def roster(self) -> dict[str, Employee]:
        return {e.employee_id: e for e in self._employees.list_all()}

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise UnknownEmployeeError(f"Employee {employee_id} not found")
        return employee

    def _next_id(self) -> str:
        ids = [int(e.employee_id) for e in self._employees.list_all() if str(e.employee_id).isdigit()]
        return str(max(ids, default=0) + 1)

    def add_employee(
        self,
        *,
        first_name: str,
        last_name: str,
        department: str,
        shift: Optional[str] = None,
    ) -> Employee:
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        department = require_non_empty(department, "Department")
        require_min_length(first_name, "First name", 2)
        require_min_length(last_name, "Last name", 2)

        employee = Employee(
            employee_id=self._next_id(),
            first_name=first_name,
            last_name=last_name,
            department=department,
            shift=ShiftType.parse(shift),
        )
        return self._employees.add(employee)

    def delete_employee(self, employee_id) -> None:
        emp_id = str(require_int_id(employee_id, "Employee id"))
        if not self._employees.get_by_id(emp_id):
            raise NotFoundError(f"Employee {emp_id} not found")
        self._employees.delete(emp_id)
        logger.info("Employee %s removed from roster", emp_id)

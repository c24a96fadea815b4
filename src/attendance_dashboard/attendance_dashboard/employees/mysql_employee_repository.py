from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ShiftType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_employee(r: dict) -> Employee:
        return Employee(
            employee_id=str(r["id"]),
            first_name=r.get("first_name") or "",
            last_name=r.get("last_name") or "",
            department=r.get("department") or "",
            shift=ShiftType.parse(r.get("shift")),
        )

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, first_name, last_name, department, shift FROM details ORDER BY id")
            return [self._to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        if not str(employee_id).isdigit():
            return None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, first_name, last_name, department, shift FROM details WHERE id=%s",
                (int(employee_id),),
            )
            r = fetchone(cur)
            return self._to_employee(r) if r else None

    def add(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO details(id, first_name, last_name, department, shift)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    int(employee.employee_id),
                    employee.first_name,
                    employee.last_name,
                    employee.department,
                    employee.shift.value,
                ),
            )
        return employee

    def delete(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM details WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0

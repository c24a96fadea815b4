from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from ..core.enums import ShiftType
from .model import Employee, employee_sort_key
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class JsonEmployeeRepository(EmployeeRepository):
    """Employee registry stored as a JSON object keyed by employee id.

    File layout::

        {"1": {"First Name": "Ahmed", "Last Name": "Ali", "Department": "IT", "Shift": "Day"}}
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _load(self) -> dict[str, dict]:
        if not self._path.exists():
            return {}
        with self._path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"Employee registry {self._path} must contain a JSON object")
        return data

    def _save(self, data: dict[str, dict]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=str(self._path.parent), suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except Exception:
            os.unlink(tmp)
            raise

    @staticmethod
    def _to_employee(employee_id: str, raw: dict) -> Employee:
        return Employee(
            employee_id=str(employee_id),
            first_name=str(raw.get("First Name") or ""),
            last_name=str(raw.get("Last Name") or ""),
            department=str(raw.get("Department") or ""),
            shift=ShiftType.parse(raw.get("Shift")),
        )

    def list_all(self) -> Sequence[Employee]:
        data = self._load()
        return [self._to_employee(k, data[k]) for k in sorted(data, key=employee_sort_key)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raw = self._load().get(str(employee_id))
        if raw is None:
            return None
        return self._to_employee(str(employee_id), raw)

    def add(self, employee: Employee) -> Employee:
        data = self._load()
        data[employee.employee_id] = {
            "First Name": employee.first_name,
            "Last Name": employee.last_name,
            "Department": employee.department,
            "Shift": employee.shift.value,
        }
        self._save(data)
        logger.info("Added employee %s to %s", employee.employee_id, self._path)
        return employee

    def delete(self, employee_id: str) -> bool:
        data = self._load()
        if data.pop(str(employee_id), None) is None:
            return False
        self._save(data)
        logger.info("Deleted employee %s from %s", employee_id, self._path)
        return True

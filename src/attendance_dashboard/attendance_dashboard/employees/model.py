from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ShiftType


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee in the roster.

    Note: Plain data object (no DB access code here).
    """

    employee_id: str
    first_name: str
    last_name: str
    department: str
    shift: ShiftType = ShiftType.DAY

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "department": self.department,
            "shift": self.shift.value,
        }


def employee_sort_key(employee_id: str):
    """Numeric ids sort numerically, others after them lexically."""
    text = str(employee_id)
    if text.isdigit():
        return (0, int(text), text)
    return (1, 0, text)

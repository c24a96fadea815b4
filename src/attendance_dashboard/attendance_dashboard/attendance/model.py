from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class PunchEvent:
    """One raw clock event read from the punch log."""

    employee_id: str
    punch_time: datetime


@dataclass(frozen=True)
class AttendancePunch:
    """One day's observed login/logout for one employee.

    ``late`` is decided once at ingestion against the employee's arrival
    window and carried through; it cannot be recovered from the times alone.
    """

    employee_id: str
    work_date: date
    login: Optional[str] = None
    logout: Optional[str] = None
    late: bool = False


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: classified attendance of one employee on one date."""

    work_date: date
    employee_id: str
    login: Optional[str]
    logout: Optional[str]
    total_hours: float
    status: AttendanceStatus
    late: bool = False
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "id": self.employee_id,
            "login": self.login,
            "logout": self.logout,
            "totalHours": self.total_hours,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceDetailRow:
    """Read-model for the dashboard table: a record joined with the roster."""

    work_date: date
    employee_id: str
    name: str
    department: str
    shift: str
    login: Optional[str]
    logout: Optional[str]
    hours: float
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "id": self.employee_id,
            "name": self.name,
            "department": self.department,
            "shift": self.shift,
            "login": self.login,
            "logout": self.logout,
            "hours": self.hours,
            "status": self.status.value,
        }

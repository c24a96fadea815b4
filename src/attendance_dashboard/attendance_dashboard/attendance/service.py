from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Generic, Mapping, Optional, Protocol, Sequence, TypeVar

from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.enums import ShiftType
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.service import EmployeeService
from .classifier import AttendanceClassifier
from .ingest import build_punches
from .mock_generator import MockAttendanceGenerator, sort_records
from .model import AttendanceDetailRow, AttendanceRecord
from .repository import PunchRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordSource(Protocol):
    def records(self, *, start: date, end: date, roster: Mapping[str, Employee]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


class PunchLogRecordSource(RecordSource):
    """Classified records computed from the punch log on every query."""

    def __init__(self, punches: PunchRepository, classifier: Optional[AttendanceClassifier] = None):
        self._punches = punches
        self._classifier = classifier or AttendanceClassifier()

    def records(self, *, start: date, end: date, roster: Mapping[str, Employee]) -> Sequence[AttendanceRecord]:
        # One extra day so night shifts can find their next-morning logout.
        events = self._punches.get_events(start_date=start, end_date=end + timedelta(days=1))
        punches = build_punches(events, roster, start=start, end=end)
        return sort_records(self._classifier.classify(p) for p in punches)


class MockRecordSource(RecordSource):
    """Generated records (development mode), clipped to the requested range."""

    def __init__(self, generator: MockAttendanceGenerator):
        self._generator = generator

    def records(self, *, start: date, end: date, roster: Mapping[str, Employee]) -> Sequence[AttendanceRecord]:
        generated = self._generator.generate(roster.values())
        return [r for r in generated if start <= r.work_date <= end]


@dataclass(frozen=True)
class AttendanceQuery:
    start: Optional[date]
    end: Optional[date]
    departments: Sequence[str] = field(default_factory=tuple)
    shift: Optional[str] = None
    search: Optional[str] = None


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    current_page: int
    total_pages: int
    total_count: int
    limit: int

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1

    def pagination(self) -> dict:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalCount": self.total_count,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
            "limit": self.limit,
        }


def paginate(items: Sequence[T], *, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    page, limit = int(page), int(limit)
    if page < 1:
        raise ValidationError("page must be >= 1")
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")

    offset = (page - 1) * limit
    return Page(
        items=list(items[offset : offset + limit]),
        current_page=page,
        total_pages=math.ceil(len(items) / limit),
        total_count=len(items),
        limit=limit,
    )


class AttendanceService:
    def __init__(self, source: RecordSource, employees: EmployeeService):
        self._source = source
        self._employees = employees

    @staticmethod
    def _validate(query: AttendanceQuery) -> None:
        if not query.start or not query.end:
            raise ValidationError("startDate and endDate are required")
        if query.start > query.end:
            raise ValidationError("startDate must not be after endDate")

    def get_records(self, query: AttendanceQuery) -> Sequence[AttendanceRecord]:
        self._validate(query)
        return self._source.records(start=query.start, end=query.end, roster=self._employees.roster())

    def get_detail_rows(self, query: AttendanceQuery) -> list[AttendanceDetailRow]:
        self._validate(query)
        roster = self._employees.roster()
        records = self._source.records(start=query.start, end=query.end, roster=roster)
        rows = [self._to_detail(r, roster.get(r.employee_id)) for r in records]
        rows = [r for r in rows if self._matches(r, query)]
        rows.sort(key=lambda r: (-r.work_date.toordinal(), r.name.lower()))
        logger.debug("Attendance query %s matched %d of %d records", query, len(rows), len(records))
        return rows

    @staticmethod
    def _to_detail(record: AttendanceRecord, employee: Optional[Employee]) -> AttendanceDetailRow:
        return AttendanceDetailRow(
            work_date=record.work_date,
            employee_id=record.employee_id,
            name=employee.full_name if employee else f"Employee {record.employee_id}",
            department=(employee.department if employee else "") or "Unknown",
            shift=employee.shift.value if employee else ShiftType.DAY.value,
            login=record.login,
            logout=record.logout,
            hours=record.total_hours,
            status=record.status,
        )

    @staticmethod
    def _matches(row: AttendanceDetailRow, query: AttendanceQuery) -> bool:
        if query.departments and row.department not in query.departments:
            return False
        if query.shift and query.shift.lower() != "all" and row.shift.lower() != query.shift.strip().lower():
            return False
        if query.search:
            needle = query.search.strip().lower()
            if not (needle in row.name.lower() or needle in row.employee_id or needle in row.department.lower()):
                return False
        return True

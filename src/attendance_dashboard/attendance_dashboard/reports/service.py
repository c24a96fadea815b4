from __future__ import annotations

import csv
import io
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..attendance.model import AttendanceDetailRow
from ..common.time_math import round_hours
from ..core.enums import AttendanceStatus


def _percent(count: int, total: int) -> str:
    return f"{(count / total * 100) if total else 0.0:.2f}"


@dataclass(frozen=True)
class StatusSummary:
    """Exact status tallies over a collection of records."""

    total: int
    counts: dict[str, int]
    percentages: dict[str, str]

    def to_dict(self) -> dict:
        return {"total": self.total, "counts": dict(self.counts), "percentages": dict(self.percentages)}


def summarize_statuses(records: Iterable) -> StatusSummary:
    """Count every status; percentages are ``count / total * 100`` to 2 decimals."""

    tally = Counter(r.status for r in records)
    total = sum(tally.values())
    counts = {s.value: tally.get(s, 0) for s in AttendanceStatus}
    return StatusSummary(
        total=total,
        counts=counts,
        percentages={k: _percent(v, total) for k, v in counts.items()},
    )


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    present_count: int
    absent_count: int
    attendance_rate: float
    average_hours: float
    dept_distribution: dict[str, int]
    shift_distribution: dict[str, int]
    status_summary: StatusSummary

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "attendanceRate": self.attendance_rate,
            "averageHours": self.average_hours,
            "deptDistribution": dict(self.dept_distribution),
            "shiftDistribution": dict(self.shift_distribution),
            "statusSummary": self.status_summary.to_dict(),
        }


class StatsReportService:
    def build_stats(self, rows: Sequence[AttendanceDetailRow]) -> DashboardStats:
        employees = {r.employee_id for r in rows}
        attended = [r for r in rows if r.status != AttendanceStatus.ABSENT]
        present_ids = {r.employee_id for r in attended}

        worked = [r.hours for r in attended if r.hours > 0]
        average_hours = round_hours(sum(worked) / len(worked)) if worked else 0.0

        total = len(employees)
        return DashboardStats(
            total_employees=total,
            present_count=len(present_ids),
            absent_count=total - len(present_ids),
            attendance_rate=float(_percent(len(present_ids), total)),
            average_hours=average_hours,
            dept_distribution=dict(Counter(r.department for r in attended)),
            shift_distribution=dict(Counter(r.shift for r in attended)),
            status_summary=summarize_statuses(rows),
        )


DETAIL_CSV_FIELDS = ["date", "id", "name", "department", "shift", "login", "logout", "hours", "status"]


def write_detail_csv(rows: Iterable[AttendanceDetailRow]) -> bytes:
    """Render detail rows as CSV (UTF-8 with BOM so spreadsheets pick the encoding)."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=DETAIL_CSV_FIELDS)
    writer.writeheader()
    for row in rows:
        data = row.to_dict()
        data["login"] = data["login"] or "-"
        data["logout"] = data["logout"] or "-"
        writer.writerow(data)
    return out.getvalue().encode("utf-8-sig")

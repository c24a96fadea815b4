"""Pair raw punch-log events into one login/logout punch per employee per day."""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import iter_days
from ..common.time_math import format_clock, minute_of_day, parse_clock
from ..core.constants import LOGIN_CUTOFF
from ..core.enums import ShiftType
from ..employees.model import Employee, employee_sort_key
from .lateness import is_late_arrival
from .model import AttendancePunch, AttendanceRecord, PunchEvent

logger = logging.getLogger(__name__)


def _is_morning(ts: datetime) -> bool:
    return ts.hour * 60 + ts.minute < minute_of_day(LOGIN_CUTOFF)


def ingest_punch(
    *,
    employee_id: str,
    work_date: date,
    login: Optional[datetime],
    logout: Optional[datetime],
    shift: ShiftType,
) -> AttendancePunch:
    """Build a punch and decide its lateness flag against the shift window."""

    login_s = format_clock(login.time()) if login else None
    logout_s = format_clock(logout.time()) if logout else None
    late = bool(login_s) and is_late_arrival(shift, login_s)
    return AttendancePunch(
        employee_id=employee_id,
        work_date=work_date,
        login=login_s,
        logout=logout_s,
        late=late,
    )


def _pair_day(times: Sequence[datetime], work_date: date, shift: ShiftType):
    if shift == ShiftType.NIGHT:
        # Evening punches open the shift, next-morning punches close it.
        evening = [t for t in times if t.date() == work_date and not _is_morning(t)]
        next_morning = [t for t in times if t.date() == work_date + timedelta(days=1) and _is_morning(t)]
        return (evening[0] if evening else None), (next_morning[-1] if next_morning else None)

    same_day = [t for t in times if t.date() == work_date]
    if not same_day:
        return None, None
    login = same_day[0]
    logout = same_day[-1] if len(same_day) > 1 else None
    return login, logout


def build_punches(
    events: Iterable[PunchEvent],
    roster: Mapping[str, Employee],
    *,
    start: date,
    end: date,
) -> list[AttendancePunch]:
    """One punch per employee per day in ``[start, end]``.

    Every roster employee gets a punch for every day (empty when nothing was
    clocked). Events from ids missing in the roster are kept and paired as a
    Day shift.
    """

    by_employee: dict[str, list[datetime]] = defaultdict(list)
    for ev in events:
        by_employee[str(ev.employee_id)].append(ev.punch_time)

    unknown = sorted(set(by_employee) - set(roster), key=employee_sort_key)
    if unknown:
        logger.warning("Punches for employees missing from the roster: %s", ", ".join(unknown))

    punches: list[AttendancePunch] = []
    for emp_id in sorted(set(roster) | set(by_employee), key=employee_sort_key):
        employee = roster.get(emp_id)
        shift = employee.shift if employee else ShiftType.DAY
        times = sorted(by_employee.get(emp_id, []))
        for work_date in iter_days(start, end):
            login, logout = _pair_day(times, work_date, shift)
            punches.append(
                ingest_punch(employee_id=emp_id, work_date=work_date, login=login, logout=logout, shift=shift)
            )
    return punches


def record_to_events(record: AttendanceRecord) -> list[PunchEvent]:
    """Clock events that would have produced ``record`` (used to seed the punch log)."""

    events: list[PunchEvent] = []
    if record.login:
        login_at = datetime.combine(record.work_date, parse_clock(record.login))
        events.append(PunchEvent(employee_id=record.employee_id, punch_time=login_at))
        if record.logout:
            logout_at = datetime.combine(record.work_date, parse_clock(record.logout))
            if logout_at <= login_at:
                logout_at += timedelta(days=1)
            events.append(PunchEvent(employee_id=record.employee_id, punch_time=logout_at))
    return events

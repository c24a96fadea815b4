"""Synthetic attendance records for development and tests.

Per employee per day, in order: weekend -> Absent; absenteeism draw ->
Absent; lateness draw; login inside the shift's arrival window (pushed out
further when late); logout one nominal shift later, jittered. Generated
records are only ever Present, Late or Absent.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import iter_days, today_local
from ..common.time_math import add_minutes, hours_between
from ..core import constants
from ..core.enums import AttendanceStatus
from ..employees.model import Employee, employee_sort_key
from .lateness import arrival_window
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MockGeneratorConfig:
    days: int = constants.DEFAULT_MOCK_DAYS
    weekend_days: tuple[int, ...] = field(default=constants.DEFAULT_WEEKEND_DAYS)
    absent_rate: float = constants.DEFAULT_ABSENT_RATE
    late_rate: float = constants.DEFAULT_LATE_RATE

    def __post_init__(self):
        if self.days < 1:
            raise ValueError("days must be >= 1")
        if not 0.0 <= self.absent_rate <= 1.0 or not 0.0 <= self.late_rate <= 1.0:
            raise ValueError("rates must be within [0, 1]")
        if any(d not in range(7) for d in self.weekend_days):
            raise ValueError("weekend_days must be weekday numbers 0-6")


def sort_records(records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    """Date descending, then employee id ascending."""
    return sorted(records, key=lambda r: (-r.work_date.toordinal(), employee_sort_key(r.employee_id)))


class MockAttendanceGenerator:
    """Random attendance over a trailing window of days.

    Randomness is injected. With ``seed`` each employee draws from its own
    stream derived from ``(seed, employee_id)``, so results do not depend on
    roster order. Otherwise all draws come from ``rng`` (a fresh
    ``random.Random`` when omitted).
    """

    def __init__(
        self,
        config: Optional[MockGeneratorConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self._config = config or MockGeneratorConfig()
        self._rng = rng or random.Random()
        self._seed = seed

    @property
    def config(self) -> MockGeneratorConfig:
        return self._config

    def window(self, end_date: Optional[date] = None) -> list[date]:
        """The ``days`` calendar days before ``end_date`` (default today), excluding it."""
        end_date = end_date or today_local()
        start = end_date - timedelta(days=self._config.days)
        return list(iter_days(start, end_date - timedelta(days=1)))

    def _rng_for(self, employee_id: str) -> random.Random:
        if self._seed is None:
            return self._rng
        return random.Random(f"{self._seed}:{employee_id}")

    def generate(self, roster: Iterable[Employee], *, end_date: Optional[date] = None) -> list[AttendanceRecord]:
        days = self.window(end_date)
        records: list[AttendanceRecord] = []
        employees = list(roster)
        for employee in employees:
            records.extend(self.generate_for_employee(employee, days, self._rng_for(employee.employee_id)))
        logger.debug("Generated %d mock records for %d employees", len(records), len(employees))
        return sort_records(records)

    def generate_for_employee(
        self, employee: Employee, days: Sequence[date], rng: random.Random
    ) -> list[AttendanceRecord]:
        return [self._generate_day(employee, d, rng) for d in days]

    def _absent(self, employee: Employee, work_date: date) -> AttendanceRecord:
        return AttendanceRecord(
            work_date=work_date,
            employee_id=employee.employee_id,
            login=None,
            logout=None,
            total_hours=0.0,
            status=AttendanceStatus.ABSENT,
        )

    def _generate_day(self, employee: Employee, work_date: date, rng: random.Random) -> AttendanceRecord:
        cfg = self._config
        if work_date.weekday() in cfg.weekend_days:
            return self._absent(employee, work_date)
        if rng.random() < cfg.absent_rate:
            return self._absent(employee, work_date)

        late = rng.random() < cfg.late_rate

        window = arrival_window(employee.shift)
        offset = rng.randint(0, window.spread_minutes)
        if late:
            offset += rng.randint(*constants.LATE_EXTRA_MINUTES)
        login = add_minutes(window.start, offset)

        shift_minutes = constants.NOMINAL_SHIFT_MINUTES + rng.randint(*constants.SHIFT_LENGTH_JITTER_MINUTES)
        logout = add_minutes(login, shift_minutes)

        return AttendanceRecord(
            work_date=work_date,
            employee_id=employee.employee_id,
            login=login,
            logout=logout,
            total_hours=hours_between(login, logout),
            status=AttendanceStatus.LATE if late else AttendanceStatus.PRESENT,
            late=late,
        )

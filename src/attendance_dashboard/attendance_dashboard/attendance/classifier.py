from __future__ import annotations

import logging
from typing import Optional

from ..common.time_math import hours_between, parse_clock
from ..core.enums import AttendanceStatus
from .factory import AttendanceStrategyFactory
from .model import AttendancePunch, AttendanceRecord
from .strategies.base import ClassificationPolicy

logger = logging.getLogger(__name__)


class AttendanceClassifier:
    """Turns punches into classified attendance records.

    Classification is an ordered decision list (first match wins):

    1. no login and no logout -> Absent
    2. login only -> Present (open shift)
    3. hours >= present threshold -> Present, or Late when the punch is flagged late
    4. hours >= partial-day threshold -> Partial Day
    5. hours > 0 -> Early Leave
    6. anything else -> Absent (data anomaly)

    Malformed clock strings raise ``MalformedTimeError`` from the time
    arithmetic layer before any status is decided.
    """

    def __init__(
        self,
        policy: Optional[ClassificationPolicy] = None,
        *,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._policy = policy or ClassificationPolicy()
        self._factory = strategy_factory or AttendanceStrategyFactory()

    @property
    def policy(self) -> ClassificationPolicy:
        return self._policy

    def classify_status(
        self,
        *,
        login: Optional[str],
        logout: Optional[str],
        total_hours: float,
        late: bool = False,
    ) -> AttendanceStatus:
        strategy = self._factory.for_punch(login=login, logout=logout)
        return strategy.decide(total_hours=max(total_hours, 0.0), late=late, policy=self._policy).status

    def classify(self, punch: AttendancePunch) -> AttendanceRecord:
        for value in (punch.login, punch.logout):
            if value:
                parse_clock(value)

        total_hours = 0.0
        if punch.login and punch.logout:
            total_hours = max(hours_between(punch.login, punch.logout), 0.0)

        strategy = self._factory.for_punch(login=punch.login, logout=punch.logout)
        decision = strategy.decide(total_hours=total_hours, late=punch.late, policy=self._policy)

        if decision.status == AttendanceStatus.ABSENT and (punch.login or punch.logout):
            logger.warning(
                "Attendance anomaly for employee %s on %s (login=%s, logout=%s): %s",
                punch.employee_id,
                punch.work_date,
                punch.login,
                punch.logout,
                decision.note,
            )

        return AttendanceRecord(
            work_date=punch.work_date,
            employee_id=punch.employee_id,
            login=punch.login,
            logout=punch.logout,
            total_hours=total_hours if decision.status != AttendanceStatus.ABSENT else 0.0,
            status=decision.status,
            late=punch.late,
            note=decision.note,
        )

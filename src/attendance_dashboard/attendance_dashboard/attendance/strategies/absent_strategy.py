from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, ClassificationPolicy, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """No login recorded (a lone logout is treated the same)."""

    def __init__(self, note: str | None = None):
        self._note = note

    def decide(self, *, total_hours: float, late: bool, policy: ClassificationPolicy) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT, note=self._note)

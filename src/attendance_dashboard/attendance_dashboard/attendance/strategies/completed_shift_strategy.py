from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, ClassificationPolicy, StatusDecision


class CompletedShiftStrategy(AttendanceStrategy):
    """Login and logout both present: classify on worked hours."""

    def decide(self, *, total_hours: float, late: bool, policy: ClassificationPolicy) -> StatusDecision:
        if total_hours >= policy.present_hours:
            return StatusDecision(status=AttendanceStatus.LATE if late else AttendanceStatus.PRESENT)
        if total_hours >= policy.partial_day_hours:
            return StatusDecision(status=AttendanceStatus.PARTIAL_DAY)
        if total_hours > 0:
            return StatusDecision(status=AttendanceStatus.EARLY_LEAVE)
        return StatusDecision(status=AttendanceStatus.ABSENT, note="non-positive worked hours")

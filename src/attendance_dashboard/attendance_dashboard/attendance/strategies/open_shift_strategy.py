from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, ClassificationPolicy, StatusDecision


class OpenShiftStrategy(AttendanceStrategy):
    """Login without logout: the shift is still running (no overnight inference)."""

    def decide(self, *, total_hours: float, late: bool, policy: ClassificationPolicy) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, note="open shift")

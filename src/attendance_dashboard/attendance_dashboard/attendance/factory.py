from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.completed_shift_strategy import CompletedShiftStrategy
from .strategies.open_shift_strategy import OpenShiftStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on which punches exist."""

    def for_punch(self, *, login: Optional[str], logout: Optional[str]) -> AttendanceStrategy:
        if not login:
            if logout:
                return AbsentStrategy(note="logout without login")
            return AbsentStrategy()
        if not logout:
            return OpenShiftStrategy()
        return CompletedShiftStrategy()

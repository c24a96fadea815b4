from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.constants import DEFAULT_PARTIAL_DAY_HOURS, DEFAULT_PRESENT_HOURS
from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


@dataclass(frozen=True)
class ClassificationPolicy:
    """Hour thresholds separating Present, Partial Day and Early Leave."""

    present_hours: float = DEFAULT_PRESENT_HOURS
    partial_day_hours: float = DEFAULT_PARTIAL_DAY_HOURS

    def __post_init__(self):
        if not 0 < self.partial_day_hours <= self.present_hours:
            raise ValueError("Thresholds must satisfy 0 < partial_day_hours <= present_hours")


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide(self, *, total_hours: float, late: bool, policy: ClassificationPolicy) -> StatusDecision:
        raise NotImplementedError

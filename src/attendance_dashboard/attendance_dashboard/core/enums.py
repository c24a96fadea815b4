from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class AttendanceStatus(str, Enum):
    """Classified outcome of one employee on one date."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    EARLY_LEAVE = "Early Leave"
    PARTIAL_DAY = "Partial Day"


class ShiftType(str, Enum):
    """Assigned work schedule category."""

    DAY = "Day"
    NIGHT = "Night"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ShiftType":
        """Normalize a free-text shift label.

        Empty values map to Day silently; unrecognized labels map to Day with a
        warning so bad roster data is visible in the logs.
        """

        if value is None:
            return cls.DAY
        if isinstance(value, ShiftType):
            return value

        label = str(value).strip().lower()
        if not label:
            return cls.DAY
        for member in cls:
            if member.value.lower() == label:
                return member

        logger.warning("Unrecognized shift label %r, defaulting to %s", value, cls.DAY.value)
        return cls.DAY

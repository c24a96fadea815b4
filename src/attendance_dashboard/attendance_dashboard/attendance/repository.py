from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import PunchEvent


class PunchRepository(Protocol):
    def get_events(self, *, start_date: date, end_date: date) -> Sequence[PunchEvent]:
        """Raw clock events with ``start_date <= DATE(punch_time) <= end_date``."""

        raise NotImplementedError

    def add_events(self, events: Sequence[PunchEvent]) -> int:
        raise NotImplementedError

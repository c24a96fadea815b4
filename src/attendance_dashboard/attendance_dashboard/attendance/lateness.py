from __future__ import annotations

from dataclasses import dataclass

from ..common.time_math import ClockValue, add_minutes, minute_of_day
from ..core.constants import (
    ARRIVAL_SPREAD_MINUTES,
    DAY_SHIFT_WINDOW_START,
    MINUTES_PER_DAY,
    NIGHT_SHIFT_WINDOW_START,
)
from ..core.enums import ShiftType


@dataclass(frozen=True)
class ArrivalWindow:
    start: str
    spread_minutes: int = ARRIVAL_SPREAD_MINUTES

    @property
    def end(self) -> str:
        return add_minutes(self.start, self.spread_minutes)


ARRIVAL_WINDOWS = {
    ShiftType.DAY: ArrivalWindow(DAY_SHIFT_WINDOW_START),
    ShiftType.NIGHT: ArrivalWindow(NIGHT_SHIFT_WINDOW_START),
}


def arrival_window(shift: ShiftType) -> ArrivalWindow:
    return ARRIVAL_WINDOWS[ShiftType.parse(shift)]


def is_late_arrival(shift: ShiftType, login: ClockValue) -> bool:
    """True when ``login`` falls after the shift's arrival window.

    The offset from the window start is measured forward around the clock, so
    a Night login at 01:00 counts as late. Offsets beyond half a day are early
    arrivals, not late ones: for the Day shift 19:45 is still late and 19:46
    is an early arrival for the next morning.
    """

    window = arrival_window(shift)
    offset = (minute_of_day(login) - minute_of_day(window.start)) % MINUTES_PER_DAY
    return window.spread_minutes < offset <= MINUTES_PER_DAY // 2

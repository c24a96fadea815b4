from datetime import time

import pytest

from attendance_dashboard.common.time_math import (
    add_minutes,
    format_clock,
    hours_between,
    minute_of_day,
    parse_clock,
    round_hours,
)
from attendance_dashboard.core.exceptions import MalformedTimeError


def test_same_day_hours():
    assert hours_between("07:50", "16:05") == 8.25
    assert hours_between("08:00", "12:30") == 4.5


def test_overnight_hours_add_a_day():
    # (435 + 1440 - 1410) / 60
    assert hours_between("23:30", "07:15") == 7.75
    # (270 + 1440 - 1210) / 60
    assert hours_between("20:10", "04:30") == 8.33


def test_identical_times_give_zero_hours():
    assert hours_between("09:00", "09:00") == 0.0


def test_hours_follow_minute_difference_and_stay_in_range():
    for login in range(0, 1440, 37):
        for logout in range(0, 1440, 41):
            a = f"{login // 60:02d}:{login % 60:02d}"
            b = f"{logout // 60:02d}:{logout % 60:02d}"
            diff = logout - login if logout >= login else logout + 1440 - login
            value = hours_between(a, b)
            assert value == round_hours(diff / 60)
            assert 0 <= value < 24


def test_add_minutes_wraps_around_midnight():
    assert add_minutes("23:50", 20) == "00:10"
    assert add_minutes("00:10", -20) == "23:50"
    assert add_minutes("08:00", 1440) == "08:00"
    assert add_minutes("08:00", -2000) == "22:40"
    assert add_minutes(time(19, 45), 30) == "20:15"


def test_round_hours_is_half_away_from_zero():
    assert round_hours(1.005) == 1.01
    assert round_hours(2.675) == 2.68
    assert round_hours(-1.005) == -1.01
    assert round_hours(8.333333) == 8.33


def test_parse_clock_drops_seconds():
    assert parse_clock("08:30:15") == time(8, 30)
    assert parse_clock(time(20, 1, 59)) == time(20, 1)
    assert format_clock(time(4, 3)) == "04:03"
    assert minute_of_day("23:59") == 1439


@pytest.mark.parametrize("value", ["24:00", "12:60", "8", "ab:cd", "", "  ", "08:00:61", None, 800])
def test_malformed_times_are_rejected(value):
    with pytest.raises(MalformedTimeError):
        parse_clock(value)


@pytest.mark.parametrize("value", ["7:05", "08:5", "123:00", "\u0660\u0667:\u0664\u0665", "\uff10\uff18:\uff10\uff10"])
def test_only_two_ascii_digit_fields_are_accepted(value):
    with pytest.raises(MalformedTimeError):
        parse_clock(value)


def test_malformed_time_is_not_coerced_to_zero_hours():
    with pytest.raises(MalformedTimeError):
        hours_between("08:00", "late")

import logging
from datetime import date, datetime

from attendance_dashboard.attendance.ingest import build_punches, record_to_events
from attendance_dashboard.attendance.model import AttendanceRecord, PunchEvent
from attendance_dashboard.core.enums import AttendanceStatus, ShiftType
from attendance_dashboard.employees.model import Employee

ROSTER = {
    "1": Employee("1", "Ahmed", "Hassan", "Operations", ShiftType.DAY),
    "2": Employee("2", "Sara", "Mansour", "Operations", ShiftType.NIGHT),
}


def _ev(emp_id, *args):
    return PunchEvent(employee_id=emp_id, punch_time=datetime(*args))


def test_day_shift_pairs_first_and_last_punch_of_the_day():
    events = [
        _ev("1", 2025, 3, 3, 12, 30),
        _ev("1", 2025, 3, 3, 7, 55),
        _ev("1", 2025, 3, 3, 16, 10),
    ]
    punches = build_punches(events, ROSTER, start=date(2025, 3, 3), end=date(2025, 3, 3))
    by_id = {p.employee_id: p for p in punches}

    assert by_id["1"].login == "07:55"
    assert by_id["1"].logout == "16:10"
    assert by_id["1"].late is False


def test_night_shift_logout_comes_from_next_morning():
    events = [
        _ev("2", 2025, 3, 3, 4, 0),  # closes the shift of 2025-03-02
        _ev("2", 2025, 3, 3, 20, 20),
        _ev("2", 2025, 3, 4, 4, 40),
    ]
    punches = build_punches(events, ROSTER, start=date(2025, 3, 3), end=date(2025, 3, 3))
    by_id = {p.employee_id: p for p in punches}

    assert by_id["2"].login == "20:20"
    assert by_id["2"].logout == "04:40"
    assert by_id["2"].late is True


def test_every_roster_employee_gets_every_day():
    punches = build_punches([], ROSTER, start=date(2025, 3, 1), end=date(2025, 3, 3))

    assert len(punches) == 6
    assert all(p.login is None and p.logout is None for p in punches)
    assert [p.employee_id for p in punches] == ["1", "1", "1", "2", "2", "2"]


def test_single_punch_is_login_only():
    punches = build_punches(
        [_ev("1", 2025, 3, 3, 8, 0)], ROSTER, start=date(2025, 3, 3), end=date(2025, 3, 3)
    )

    assert punches[0].login == "08:00"
    assert punches[0].logout is None


def test_unknown_employee_is_kept_as_day_shift(caplog):
    with caplog.at_level(logging.WARNING):
        punches = build_punches(
            [_ev("99", 2025, 3, 3, 9, 0)], ROSTER, start=date(2025, 3, 3), end=date(2025, 3, 3)
        )
    unknown = [p for p in punches if p.employee_id == "99"]

    assert len(unknown) == 1
    assert unknown[0].login == "09:00"
    assert unknown[0].late is True
    assert "99" in caplog.text


def test_record_to_events_moves_overnight_logout_to_next_day():
    rec = AttendanceRecord(
        work_date=date(2025, 3, 3),
        employee_id="2",
        login="20:00",
        logout="04:00",
        total_hours=8.0,
        status=AttendanceStatus.PRESENT,
    )

    events = record_to_events(rec)

    assert [e.punch_time for e in events] == [datetime(2025, 3, 3, 20, 0), datetime(2025, 3, 4, 4, 0)]


def test_record_to_events_skips_absences():
    rec = AttendanceRecord(
        work_date=date(2025, 3, 3),
        employee_id="1",
        login=None,
        logout=None,
        total_hours=0.0,
        status=AttendanceStatus.ABSENT,
    )

    assert record_to_events(rec) == []

import logging
from datetime import date

import pytest

from attendance_dashboard.attendance.classifier import AttendanceClassifier
from attendance_dashboard.attendance.model import AttendancePunch
from attendance_dashboard.attendance.strategies.base import ClassificationPolicy
from attendance_dashboard.core.enums import AttendanceStatus
from attendance_dashboard.core.exceptions import MalformedTimeError

DAY = date(2025, 3, 3)


def _punch(login=None, logout=None, late=False):
    return AttendancePunch(employee_id="1", work_date=DAY, login=login, logout=logout, late=late)


def test_day_shift_full_day_is_present():
    rec = AttendanceClassifier().classify(_punch("07:50", "16:05"))

    assert rec.total_hours == 8.25
    assert rec.status == AttendanceStatus.PRESENT


def test_night_shift_across_midnight_is_present():
    rec = AttendanceClassifier().classify(_punch("20:10", "04:30"))

    assert rec.total_hours == 8.33
    assert rec.status == AttendanceStatus.PRESENT


def test_late_flag_from_ingestion_turns_full_day_into_late():
    rec = AttendanceClassifier().classify(_punch("20:10", "04:30", late=True))

    assert rec.status == AttendanceStatus.LATE
    assert rec.late is True


def test_short_day_is_early_leave():
    rec = AttendanceClassifier().classify(_punch("08:00", "12:30"))

    assert rec.total_hours == 4.5
    assert rec.status == AttendanceStatus.EARLY_LEAVE


def test_no_punches_is_absent():
    rec = AttendanceClassifier().classify(_punch())

    assert rec.total_hours == 0
    assert rec.status == AttendanceStatus.ABSENT
    assert rec.login is None and rec.logout is None


def test_login_without_logout_is_open_shift_present():
    rec = AttendanceClassifier().classify(_punch("08:05", None, late=True))

    assert rec.status == AttendanceStatus.PRESENT
    assert rec.total_hours == 0


def test_logout_without_login_is_absent_and_does_not_raise():
    rec = AttendanceClassifier().classify(_punch(None, "17:00"))

    assert rec.status == AttendanceStatus.ABSENT
    assert rec.total_hours == 0


def test_exact_thresholds():
    clf = AttendanceClassifier()

    assert clf.classify(_punch("08:00", "16:00")).status == AttendanceStatus.PRESENT
    assert clf.classify(_punch("08:00", "16:00", late=True)).status == AttendanceStatus.LATE
    assert clf.classify(_punch("08:00", "14:00")).status == AttendanceStatus.PARTIAL_DAY
    assert clf.classify(_punch("08:00", "13:59")).status == AttendanceStatus.EARLY_LEAVE
    assert clf.classify(_punch("08:00", "15:59")).status == AttendanceStatus.PARTIAL_DAY


@pytest.mark.parametrize(
    "hours,late,expected",
    [
        (8.0, False, AttendanceStatus.PRESENT),
        (8.0, True, AttendanceStatus.LATE),
        (7.99, True, AttendanceStatus.PARTIAL_DAY),
        (6.0, False, AttendanceStatus.PARTIAL_DAY),
        (5.99, False, AttendanceStatus.EARLY_LEAVE),
        (0.01, False, AttendanceStatus.EARLY_LEAVE),
        (0.0, False, AttendanceStatus.ABSENT),
        (-3.0, False, AttendanceStatus.ABSENT),
    ],
)
def test_classify_status_decision_list(hours, late, expected):
    clf = AttendanceClassifier()
    assert clf.classify_status(login="08:00", logout="17:00", total_hours=hours, late=late) == expected


def test_zero_hours_with_both_times_is_logged_anomaly(caplog):
    with caplog.at_level(logging.WARNING):
        rec = AttendanceClassifier().classify(_punch("09:00", "09:00"))

    assert rec.status == AttendanceStatus.ABSENT
    assert rec.total_hours == 0
    assert "anomaly" in caplog.text


def test_classification_is_idempotent():
    clf = AttendanceClassifier()
    punch = _punch("21:00", "03:10", late=True)

    assert clf.classify(punch) == clf.classify(punch)


def test_malformed_times_propagate():
    clf = AttendanceClassifier()

    with pytest.raises(MalformedTimeError):
        clf.classify(_punch("25:00", "08:00"))
    with pytest.raises(MalformedTimeError):
        clf.classify(_punch("8am", None))


def test_thresholds_are_configurable():
    clf = AttendanceClassifier(ClassificationPolicy(present_hours=7.5, partial_day_hours=4.0))

    assert clf.classify(_punch("08:00", "15:30")).status == AttendanceStatus.PRESENT
    assert clf.classify(_punch("08:00", "12:00")).status == AttendanceStatus.PARTIAL_DAY


def test_policy_rejects_inverted_thresholds():
    with pytest.raises(ValueError):
        ClassificationPolicy(present_hours=5.0, partial_day_hours=6.0)

import pytest

from src.student_attendance.student_attendance.attendance.derivation import percentage, severity
from src.student_attendance.student_attendance.attendance.model import AttendanceCounters
from src.student_attendance.student_attendance.core.constants import (
    EXCLUSION_MISSED_THRESHOLD,
    PROVIDED_PERCENTAGE_SENTINEL,
    WARNING_MISSED_THRESHOLD,
)
from src.student_attendance.student_attendance.core.enums import AttendanceSeverity


def test_thresholds_are_named_constants():
    assert WARNING_MISSED_THRESHOLD == 2
    assert EXCLUSION_MISSED_THRESHOLD == 5


@pytest.mark.parametrize(
    "missed, expected",
    [
        (-3, AttendanceSeverity.SUCCESS),
        (0, AttendanceSeverity.SUCCESS),
        (1, AttendanceSeverity.SUCCESS),
        (2, AttendanceSeverity.WARNING),
        (4, AttendanceSeverity.WARNING),
        (5, AttendanceSeverity.EXCLUSION),
        (12, AttendanceSeverity.EXCLUSION),
    ],
)
def test_severity_ladder(missed, expected):
    assert severity(missed) == expected


def test_percentage_full_attendance():
    assert percentage(AttendanceCounters(total=45, present=45, absent=0)) == 100


def test_percentage_rounds_ratio():
    assert percentage(AttendanceCounters(total=45, present=38, absent=7)) == 84


def test_percentage_rounds_half_up():
    # 1/8 = 12.5%
    assert percentage(AttendanceCounters(total=8, present=1, absent=7)) == 13


def test_percentage_empty_term_is_zero():
    assert percentage(AttendanceCounters(total=0, present=0, absent=0)) == 0


def test_percentage_does_not_validate_counters():
    # present > total is reported as-is by the data source; the result is still clamped.
    assert percentage(AttendanceCounters(total=10, present=12, absent=0)) == 100


def test_provided_percentage_is_clamped():
    counters = AttendanceCounters(total=45, present=38, absent=7)

    assert percentage(counters, 150) == 100
    assert percentage(counters, -10) == 0
    assert percentage(counters, 72) == 72


def test_sentinel_percentage_means_compute_locally():
    counters = AttendanceCounters(total=45, present=38, absent=7)

    assert PROVIDED_PERCENTAGE_SENTINEL == -1
    assert percentage(counters, PROVIDED_PERCENTAGE_SENTINEL) == 84
    assert percentage(AttendanceCounters(total=0, present=0, absent=0), -1) == 0
    assert percentage(counters, -2) == 0


def test_derivations_are_repeatable():
    counters = AttendanceCounters(total=45, present=38, absent=7)

    assert percentage(counters) == percentage(counters)
    assert severity(3) is severity(3)

import pytest

from src.student_attendance.student_attendance.core.enums import SessionStatus
from src.student_attendance.student_attendance.core.exceptions import ValidationError
from src.student_attendance.student_attendance.sessions.mapper import (
    session_from_api,
    status_from_api,
    up_next_from_api,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("live", SessionStatus.LIVE_NOW),
        ("ACTIVE", SessionStatus.LIVE_NOW),
        ("starting_soon", SessionStatus.STARTS_SOON),
        ("scheduled", SessionStatus.UPCOMING),
        ("completed", SessionStatus.PAST),
        ("past", SessionStatus.PAST),
        ("cancelled", SessionStatus.UPCOMING),
        (None, SessionStatus.UPCOMING),
    ],
)
def test_status_from_api(raw, expected):
    assert status_from_api(raw) == expected


def test_session_from_api_maps_fields():
    record = session_from_api(
        {
            "id": 7,
            "title": "Advanced Calculus",
            "formattedDate": "Wednesday, Oct 25",
            "timeRange": "09:00 AM - 10:30 AM",
            "location": "Room 101",
            "status": "live",
            "attendanceDeadline": "09:15 AM",
            "startsIn": "",
            "isToday": True,
        }
    )

    assert record.id == "7"
    assert record.date == "Wednesday, Oct 25"
    assert record.status == SessionStatus.LIVE_NOW
    assert record.attendance_deadline == "09:15 AM"
    assert record.starts_in is None
    assert record.is_today is True


def test_session_from_api_requires_title():
    with pytest.raises(ValidationError):
        session_from_api({"id": "1", "title": "  "})


def test_session_from_api_rejects_bad_flag():
    with pytest.raises(ValidationError):
        session_from_api({"id": "1", "title": "Physics", "isToday": "maybe"})


def test_up_next_from_api():
    item = up_next_from_api({"startTime": "08:00 AM", "moduleName": "Chemistry Lab", "room": "Room 201"})

    assert item.clock == "08:00"
    assert item.meridiem == "AM"
    assert item.checked_in_time is None

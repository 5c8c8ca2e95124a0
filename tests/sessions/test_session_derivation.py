import pytest

from src.student_attendance.student_attendance.core.enums import SessionStatus, SessionTab
from src.student_attendance.student_attendance.core.exceptions import ValidationError
from src.student_attendance.student_attendance.sessions.derivation import (
    can_check_in,
    filter_sessions_for_tab,
    group_sessions_by_date,
    status_badge,
    tab_from_value,
)
from src.student_attendance.student_attendance.sessions.model import SessionRecord


def _session(sid, status, *, date="Wednesday, Oct 25", is_today=False, **kw):
    return SessionRecord(
        id=sid,
        title=f"Class {sid}",
        date=date,
        time_range="09:00 AM - 10:30 AM",
        location="Room 101",
        status=status,
        is_today=is_today,
        **kw,
    )


def _four_sessions():
    return [
        _session("1", SessionStatus.LIVE_NOW, is_today=True),
        _session("2", SessionStatus.STARTS_SOON, is_today=True, starts_in="2H"),
        _session("3", SessionStatus.UPCOMING),
        _session("4", SessionStatus.PAST),
    ]


def test_today_tab_keeps_live_and_starting_today_in_order():
    sessions = _four_sessions()

    result = filter_sessions_for_tab(sessions, SessionTab.TODAY)

    assert [s.id for s in result] == ["1", "2"]


def test_today_tab_skips_starts_soon_not_today():
    sessions = [_session("1", SessionStatus.STARTS_SOON, is_today=False)]

    assert filter_sessions_for_tab(sessions, SessionTab.TODAY) == []


def test_upcoming_and_past_tabs():
    sessions = _four_sessions()

    assert [s.id for s in filter_sessions_for_tab(sessions, SessionTab.UPCOMING)] == ["3"]
    assert [s.id for s in filter_sessions_for_tab(sessions, SessionTab.PAST)] == ["4"]


def test_filter_accepts_iterators_and_is_repeatable():
    sessions = _four_sessions()

    first = filter_sessions_for_tab(iter(sessions), SessionTab.TODAY)
    second = filter_sessions_for_tab(iter(sessions), SessionTab.TODAY)

    assert first == second


def test_group_by_date_keeps_encounter_order():
    sessions = [
        _session("a", SessionStatus.UPCOMING, date="Wednesday, Oct 25"),
        _session("b", SessionStatus.UPCOMING, date="Thursday, Oct 26"),
        _session("c", SessionStatus.UPCOMING, date="Wednesday, Oct 25"),
    ]

    groups = group_sessions_by_date(sessions)

    assert list(groups) == ["Wednesday, Oct 25", "Thursday, Oct 26"]
    assert [s.id for s in groups["Wednesday, Oct 25"]] == ["a", "c"]
    assert [s.id for s in groups["Thursday, Oct 26"]] == ["b"]


def test_group_by_date_uses_exact_labels():
    sessions = [
        _session("a", SessionStatus.UPCOMING, date="Oct 25"),
        _session("b", SessionStatus.UPCOMING, date="oct 25"),
    ]

    assert len(group_sessions_by_date(sessions)) == 2


def test_status_badges():
    live, soon, upcoming, past = _four_sessions()

    assert status_badge(live) == "LIVE NOW"
    assert status_badge(soon) == "STARTS IN 2H"
    assert status_badge(upcoming) == "UPCOMING"
    assert status_badge(past) is None
    assert status_badge(_session("5", SessionStatus.STARTS_SOON)) == "STARTS SOON"


def test_check_in_requires_live_session_with_deadline():
    assert can_check_in(_session("1", SessionStatus.LIVE_NOW, attendance_deadline="09:15 AM"))
    assert not can_check_in(_session("2", SessionStatus.LIVE_NOW))
    assert not can_check_in(_session("3", SessionStatus.UPCOMING, attendance_deadline="09:15 AM"))


def test_tab_from_value():
    assert tab_from_value("today") == SessionTab.TODAY
    assert tab_from_value(" Upcoming ") == SessionTab.UPCOMING
    assert SessionTab.PAST.label == "Past"

    with pytest.raises(ValidationError):
        tab_from_value("tomorrow")
    with pytest.raises(ValidationError):
        tab_from_value("")

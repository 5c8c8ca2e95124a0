from __future__ import annotations

from typing import Any, Mapping, Sequence

from .mapper import session_from_api, up_next_from_api
from .model import SessionRecord, UpNextClass

# Payloads in the shape the sessions API returns them.
SAMPLE_SESSION_PAYLOADS: tuple[dict, ...] = (
    {
        "id": "1",
        "title": "Advanced Calculus",
        "formattedDate": "Wednesday, Oct 25",
        "timeRange": "09:00 AM - 10:30 AM",
        "location": "Room 101 • Science Building",
        "status": "live",
        "attendanceDeadline": "09:15 AM",
        "isToday": True,
    },
    {
        "id": "2",
        "title": "History of Art",
        "formattedDate": "Wednesday, Oct 25",
        "timeRange": "11:00 AM • 90 min",
        "location": "Lecture Hall B",
        "status": "starting_soon",
        "startsIn": "2H",
        "isToday": True,
    },
    {
        "id": "3",
        "title": "Physics 101",
        "formattedDate": "Thursday, Oct 26",
        "timeRange": "10:00 AM • Lab 3",
        "location": "Lab 3",
        "status": "upcoming",
    },
    {
        "id": "4",
        "title": "Intro to CS",
        "formattedDate": "Thursday, Oct 26",
        "timeRange": "02:00 PM • Room 304",
        "location": "Room 304",
        "status": "upcoming",
    },
)

SAMPLE_UP_NEXT_PAYLOADS: tuple[dict, ...] = (
    {"startTime": "09:00 AM", "moduleName": "Introduction to Physics", "room": "Room 302", "duration": "1h 30m"},
    {"startTime": "11:30 AM", "moduleName": "World History", "room": "Room 105", "duration": "1h 00m"},
    {
        "startTime": "08:00 AM",
        "moduleName": "Chemistry Lab",
        "room": "Room 201",
        "duration": "2h 00m",
        "checkedInTime": "Checked in at 8:55 AM",
    },
)


class SampleSessionRepository:
    """In-memory stand-in for the sessions API; same data for every student."""

    def __init__(self, sessions: Sequence[SessionRecord] | None = None, up_next: Sequence[UpNextClass] | None = None):
        if sessions is None or up_next is None:
            defaults = self.from_payloads(SAMPLE_SESSION_PAYLOADS, SAMPLE_UP_NEXT_PAYLOADS)
            sessions = defaults._sessions if sessions is None else sessions
            up_next = defaults._up_next if up_next is None else up_next
        self._sessions = tuple(sessions)
        self._up_next = tuple(up_next)

    @classmethod
    def from_payloads(
        cls,
        sessions: Sequence[Mapping[str, Any]],
        up_next: Sequence[Mapping[str, Any]] = (),
    ) -> "SampleSessionRepository":
        """Build the repository from raw API payloads (raises ValidationError on bad ones)."""
        return cls([session_from_api(p) for p in sessions], [up_next_from_api(p) for p in up_next])

    def list_for_student(self, student_id: str) -> list[SessionRecord]:
        return list(self._sessions)

    def list_up_next(self, student_id: str) -> list[UpNextClass]:
        return list(self._up_next)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import SessionStatus


@dataclass(frozen=True)
class SessionRecord:
    """One scheduled class meeting."""

    id: str
    title: str
    date: str  # display label, e.g. "Wednesday, Oct 25"
    time_range: str
    location: str
    status: SessionStatus
    starts_in: Optional[str] = None
    attendance_deadline: Optional[str] = None
    is_today: bool = False


@dataclass(frozen=True)
class SessionGroup:
    date: str
    sessions: list[SessionRecord] = field(default_factory=list)


@dataclass(frozen=True)
class UpNextClass:
    """Upcoming class entry of the dashboard."""

    time: str  # e.g. "09:00 AM"
    module_name: str
    room: str
    duration: str
    checked_in_time: Optional[str] = None

    @property
    def clock(self) -> str:
        return self.time.split(" ")[0]

    @property
    def meridiem(self) -> str:
        parts = self.time.split(" ")
        return parts[1] if len(parts) > 1 else ""

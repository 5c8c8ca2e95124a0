from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import AttendanceCounters, AttendanceNotice
from ..sessions.model import UpNextClass


@dataclass(frozen=True)
class DashboardSummary:
    user_name: str
    counters: AttendanceCounters
    percentage: int
    encouragement_message: str
    notice: AttendanceNotice
    up_next: list[UpNextClass] = field(default_factory=list)

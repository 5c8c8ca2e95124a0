from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceCounters, MissedClasses


class AttendanceRepository(Protocol):
    """Data source for a student's attendance figures (normally an HTTP API)."""

    def get_counters(self, student_id: str) -> AttendanceCounters:
        raise NotImplementedError

    def get_missed_classes(self, student_id: str) -> MissedClasses:
        raise NotImplementedError

    def get_provided_percentage(self, student_id: str) -> Optional[int]:
        """Percentage already computed by the backend, or None to derive it locally."""

        raise NotImplementedError

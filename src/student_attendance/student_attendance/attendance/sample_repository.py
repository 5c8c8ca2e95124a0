from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .model import AttendanceCounters, MissedClasses

SAMPLE_COUNTERS = AttendanceCounters(total=45, present=45, absent=0)


@dataclass
class SampleAttendanceRepository:
    """In-memory stand-in for the attendance API.

    Every student gets the sample figures unless an override is registered.
    """

    counters: dict[str, AttendanceCounters] = field(default_factory=dict)
    missed: dict[str, MissedClasses] = field(default_factory=dict)
    provided_percentages: dict[str, int] = field(default_factory=dict)

    def get_counters(self, student_id: str) -> AttendanceCounters:
        return self.counters.get(student_id, SAMPLE_COUNTERS)

    def get_missed_classes(self, student_id: str) -> MissedClasses:
        return self.missed.get(student_id, MissedClasses())

    def get_provided_percentage(self, student_id: str) -> Optional[int]:
        return self.provided_percentages.get(student_id)

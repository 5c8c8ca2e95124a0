from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceSeverity


@dataclass(frozen=True)
class AttendanceCounters:
    """Raw attendance counters for one student.

    No arithmetic relationship is enforced between the fields; the data source
    may report ``present + absent != total``.
    """

    total: int = 0
    present: int = 0
    absent: int = 0


@dataclass(frozen=True)
class MissedClasses:
    """Missed-class count for one course/module (course_name may be unknown)."""

    missed_count: int = 0
    course_name: Optional[str] = None


@dataclass(frozen=True)
class AttendanceNotice:
    """Read-model for the attendance card shown on the dashboard."""

    severity: AttendanceSeverity
    title: str
    message: str
    action_label: str

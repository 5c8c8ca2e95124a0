from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceSeverity
from ..model import AttendanceNotice
from .base import NoticeStrategy


class ExclusionNotice(NoticeStrategy):
    severity = AttendanceSeverity.EXCLUSION

    def build(self, *, course_name: Optional[str], missed_count: int) -> AttendanceNotice:
        return AttendanceNotice(
            severity=self.severity,
            title="Exclusion Warning",
            message=f"You have been excluded from {course_name or 'this session'} due to {missed_count} absences.",
            action_label="View Report",
        )

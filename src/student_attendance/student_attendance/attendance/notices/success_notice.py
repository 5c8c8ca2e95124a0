from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceSeverity
from ..model import AttendanceNotice
from .base import NoticeStrategy


class SuccessNotice(NoticeStrategy):
    """No meaningful absences."""

    severity = AttendanceSeverity.SUCCESS

    def build(self, *, course_name: Optional[str], missed_count: int) -> AttendanceNotice:
        return AttendanceNotice(
            severity=self.severity,
            title="Great attendance!",
            message="No absences recorded so far. You're on track with all your classes!",
            action_label="View Report",
        )

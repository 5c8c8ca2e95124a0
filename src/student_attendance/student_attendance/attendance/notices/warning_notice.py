from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceSeverity
from ..model import AttendanceNotice
from .base import NoticeStrategy


class WarningNotice(NoticeStrategy):
    """One more absence away from a penalty."""

    severity = AttendanceSeverity.WARNING

    def build(self, *, course_name: Optional[str], missed_count: int) -> AttendanceNotice:
        return AttendanceNotice(
            severity=self.severity,
            title="Attendance Warning",
            message=(
                f"You have missed {missed_count} classes in {course_name or 'this module'}. "
                "Risk of penalty on next absence."
            ),
            action_label="View Details",
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceSeverity
from .derivation import severity
from .model import AttendanceNotice
from .notices.base import NoticeStrategy
from .notices.exclusion_notice import ExclusionNotice
from .notices.success_notice import SuccessNotice
from .notices.warning_notice import WarningNotice


@dataclass
class NoticeStrategyFactory:
    """Factory Pattern: choose the notice wording for a missed-class count."""

    def for_severity(self, level: AttendanceSeverity) -> NoticeStrategy:
        if level == AttendanceSeverity.EXCLUSION:
            return ExclusionNotice()
        if level == AttendanceSeverity.WARNING:
            return WarningNotice()
        return SuccessNotice()

    def for_missed_count(self, missed_count: int) -> NoticeStrategy:
        return self.for_severity(severity(missed_count))

    def build_notice(self, *, missed_count: int, course_name: Optional[str] = None) -> AttendanceNotice:
        strategy = self.for_missed_count(missed_count)
        return strategy.build(course_name=course_name, missed_count=max(0, int(missed_count)))

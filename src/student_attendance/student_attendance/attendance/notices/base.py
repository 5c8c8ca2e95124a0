from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...core.enums import AttendanceSeverity
from ..model import AttendanceNotice


class NoticeStrategy(ABC):
    """Strategy Pattern: encapsulate the wording of one attendance severity."""

    severity: AttendanceSeverity

    @abstractmethod
    def build(self, *, course_name: Optional[str], missed_count: int) -> AttendanceNotice:
        raise NotImplementedError

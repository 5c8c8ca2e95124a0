from __future__ import annotations

from enum import Enum


class AttendanceSeverity(str, Enum):
    """Position of a student on the absence penalty ladder for one course."""

    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    EXCLUSION = "EXCLUSION"


class SessionStatus(str, Enum):
    """Lifecycle state of a class session, as reported by the data source."""

    LIVE_NOW = "LIVE_NOW"
    STARTS_SOON = "STARTS_SOON"
    UPCOMING = "UPCOMING"
    PAST = "PAST"


class SessionTab(str, Enum):
    """Filter selector of the sessions screen."""

    TODAY = "TODAY"
    UPCOMING = "UPCOMING"
    PAST = "PAST"

    @property
    def label(self) -> str:
        return self.value.capitalize()

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import NoticeStrategyFactory
from .attendance.repository import AttendanceRepository
from .attendance.sample_repository import SampleAttendanceRepository
from .core.constants import DEFAULT_ENCOURAGEMENT_MESSAGE
from .dashboard.service import DashboardService
from .sessions.repository import SessionRepository
from .sessions.sample_repository import SampleSessionRepository
from .sessions.service import SessionService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    sessions_repo: SessionRepository

    dashboard_service: DashboardService
    session_service: SessionService


def build_container(
    *,
    attendance_repo: Optional[AttendanceRepository] = None,
    sessions_repo: Optional[SessionRepository] = None,
    encouragement_message: str = DEFAULT_ENCOURAGEMENT_MESSAGE,
) -> Container:
    """Wire services; data sources default to the in-memory sample ones."""
    attendance_repo = attendance_repo or SampleAttendanceRepository()
    sessions_repo = sessions_repo or SampleSessionRepository()

    dashboard_service = DashboardService(
        attendance_repo,
        sessions_repo,
        notice_factory=NoticeStrategyFactory(),
        encouragement_message=encouragement_message,
    )
    session_service = SessionService(sessions_repo)

    return Container(
        attendance_repo=attendance_repo,
        sessions_repo=sessions_repo,
        dashboard_service=dashboard_service,
        session_service=session_service,
    )

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Optional

from ..attendance.derivation import percentage
from ..attendance.factory import NoticeStrategyFactory
from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_ENCOURAGEMENT_MESSAGE
from ..sessions.repository import SessionRepository
from .model import DashboardSummary

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        sessions: SessionRepository,
        *,
        notice_factory: NoticeStrategyFactory | None = None,
        encouragement_message: str = DEFAULT_ENCOURAGEMENT_MESSAGE,
    ):
        self._attendance = attendance
        self._sessions = sessions
        self._factory = notice_factory or NoticeStrategyFactory()
        self._encouragement_message = encouragement_message

    def build_summary(
        self,
        student_id: str,
        *,
        user_name: str,
        encouragement_message: Optional[str] = None,
    ) -> DashboardSummary:
        counters = self._attendance.get_counters(student_id)
        overall = percentage(counters, self._attendance.get_provided_percentage(student_id))

        missed = self._attendance.get_missed_classes(student_id)
        notice = self._factory.build_notice(missed_count=missed.missed_count, course_name=missed.course_name)

        logger.debug(
            "dashboard student=%s percentage=%d severity=%s missed=%d",
            student_id, overall, notice.severity.value, missed.missed_count,
        )

        return DashboardSummary(
            user_name=user_name,
            counters=counters,
            percentage=overall,
            encouragement_message=encouragement_message or self._encouragement_message,
            notice=notice,
            up_next=list(self._sessions.list_up_next(student_id)),
        )

    def build_summary_ui(self, student_id: str, *, user_name: str) -> dict:
        summary = self.build_summary(student_id, user_name=user_name)
        return {
            "user_name": summary.user_name,
            "counters": asdict(summary.counters),
            "percentage": summary.percentage,
            "encouragement_message": summary.encouragement_message,
            "notice": {
                "severity": summary.notice.severity.value,
                "title": summary.notice.title,
                "message": summary.notice.message,
                "action_label": summary.notice.action_label,
            },
            "up_next": [
                {
                    "clock": c.clock,
                    "meridiem": c.meridiem,
                    "module_name": c.module_name,
                    "room": c.room,
                    "duration": c.duration,
                    "checked_in_time": c.checked_in_time,
                }
                for c in summary.up_next
            ],
        }

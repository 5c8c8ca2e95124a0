from __future__ import annotations

import logging

from ..core.enums import SessionTab
from .derivation import can_check_in, filter_sessions_for_tab, group_sessions_by_date, status_badge
from .model import SessionGroup, SessionRecord
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    """Use case: the "My Sessions" screen (tab filter + date grouping)."""

    def __init__(self, sessions: SessionRepository):
        self._sessions = sessions

    def tab_view(self, student_id: str, tab: SessionTab) -> list[SessionGroup]:
        records = self._sessions.list_for_student(student_id)
        filtered = filter_sessions_for_tab(records, tab)
        groups = [SessionGroup(date=d, sessions=items) for d, items in group_sessions_by_date(filtered).items()]

        logger.debug(
            "sessions tab=%s student=%s kept=%d/%d groups=%d",
            tab.value, student_id, len(filtered), len(records), len(groups),
        )
        return groups

    def tab_view_ui(self, student_id: str, tab: SessionTab) -> list[dict]:
        return [
            {"date": g.date, "sessions": [self._to_ui(s) for s in g.sessions]}
            for g in self.tab_view(student_id, tab)
        ]

    def _to_ui(self, s: SessionRecord) -> dict:
        return {
            "id": s.id,
            "title": s.title,
            "time_range": s.time_range,
            "location": s.location,
            "status": s.status.value,
            "badge": status_badge(s),
            "attendance_deadline": s.attendance_deadline,
            "can_check_in": can_check_in(s),
        }

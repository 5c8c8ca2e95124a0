"""Pure session rules: tab filtering, date grouping and card badges."""

from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import SessionStatus, SessionTab
from ..core.exceptions import ValidationError
from .model import SessionRecord


def is_in_tab(session: SessionRecord, tab: SessionTab) -> bool:
    if tab == SessionTab.TODAY:
        return session.status == SessionStatus.LIVE_NOW or (
            session.status == SessionStatus.STARTS_SOON and session.is_today
        )
    if tab == SessionTab.UPCOMING:
        return session.status == SessionStatus.UPCOMING
    if tab == SessionTab.PAST:
        return session.status == SessionStatus.PAST
    return False


def filter_sessions_for_tab(sessions: Iterable[SessionRecord], tab: SessionTab) -> list[SessionRecord]:
    """Stable filter: keeps the input order and never re-sorts."""
    return [s for s in sessions if is_in_tab(s, tab)]


def group_sessions_by_date(sessions: Iterable[SessionRecord]) -> dict[str, list[SessionRecord]]:
    """Group by exact date label.

    Keys keep first-seen order, members keep their relative input order.
    """
    groups: dict[str, list[SessionRecord]] = {}
    for s in sessions:
        groups.setdefault(s.date, []).append(s)
    return groups


def tab_from_value(value: Optional[str]) -> SessionTab:
    """Parse a tab selector such as "today" or "Upcoming"."""
    if value is None or not str(value).strip():
        raise ValidationError("tab must not be empty")

    key = str(value).strip().upper()
    try:
        return SessionTab(key)
    except ValueError:
        raise ValidationError(f"Unknown session tab: {value!r}") from None


def status_badge(session: SessionRecord) -> Optional[str]:
    """Badge text of a session card; past sessions have none."""
    if session.status == SessionStatus.LIVE_NOW:
        return "LIVE NOW"
    if session.status == SessionStatus.STARTS_SOON:
        return f"STARTS IN {session.starts_in}" if session.starts_in else "STARTS SOON"
    if session.status == SessionStatus.UPCOMING:
        return "UPCOMING"
    return None


def can_check_in(session: SessionRecord) -> bool:
    return session.status == SessionStatus.LIVE_NOW and session.attendance_deadline is not None

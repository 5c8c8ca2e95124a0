"""Map session payloads of the attendance API to domain records."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import optional_text, parse_bool, require_non_empty
from ..core.enums import SessionStatus
from .model import SessionRecord, UpNextClass

API_STATUS_MAP = {
    "live": SessionStatus.LIVE_NOW,
    "active": SessionStatus.LIVE_NOW,
    "starting_soon": SessionStatus.STARTS_SOON,
    "upcoming": SessionStatus.UPCOMING,
    "scheduled": SessionStatus.UPCOMING,
    "completed": SessionStatus.PAST,
    "past": SessionStatus.PAST,
}


def status_from_api(raw: Optional[str]) -> SessionStatus:
    """Unknown or missing statuses fall back to UPCOMING."""
    if raw is None:
        return SessionStatus.UPCOMING
    return API_STATUS_MAP.get(str(raw).strip().lower(), SessionStatus.UPCOMING)


def session_from_api(payload: Mapping[str, Any]) -> SessionRecord:
    return SessionRecord(
        id=require_non_empty(_as_text(payload.get("id")), "id"),
        title=require_non_empty(payload.get("title"), "title"),
        date=str(payload.get("formattedDate") or ""),
        time_range=str(payload.get("timeRange") or ""),
        location=str(payload.get("location") or ""),
        status=status_from_api(payload.get("status")),
        starts_in=optional_text(payload.get("startsIn")),
        attendance_deadline=optional_text(payload.get("attendanceDeadline")),
        is_today=parse_bool(payload.get("isToday"), "isToday"),
    )


def up_next_from_api(payload: Mapping[str, Any]) -> UpNextClass:
    return UpNextClass(
        time=require_non_empty(payload.get("startTime"), "startTime"),
        module_name=require_non_empty(payload.get("moduleName"), "moduleName"),
        room=str(payload.get("room") or ""),
        duration=str(payload.get("duration") or ""),
        checked_in_time=optional_text(payload.get("checkedInTime")),
    )


def _as_text(value: Any) -> Optional[str]:
    # API ids may arrive as integers.
    return None if value is None else str(value)

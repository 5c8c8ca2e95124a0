from __future__ import annotations

from typing import Protocol, Sequence

from .model import SessionRecord, UpNextClass


class SessionRepository(Protocol):
    def list_for_student(self, student_id: str) -> Sequence[SessionRecord]:
        """Sessions in the order the data source reports them."""

        raise NotImplementedError

    def list_up_next(self, student_id: str) -> Sequence[UpNextClass]:
        raise NotImplementedError

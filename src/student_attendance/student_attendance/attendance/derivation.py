"""Pure attendance rules: percentage and severity.

Nothing here performs I/O or keeps state; every call derives a fresh value
from its arguments.
"""

from __future__ import annotations

from typing import Optional

from ..core.constants import (
    EXCLUSION_MISSED_THRESHOLD,
    PERCENTAGE_MAX,
    PERCENTAGE_MIN,
    PROVIDED_PERCENTAGE_SENTINEL,
    WARNING_MISSED_THRESHOLD,
)
from ..core.enums import AttendanceSeverity
from .model import AttendanceCounters


def clamp_percentage(value: int) -> int:
    return max(PERCENTAGE_MIN, min(PERCENTAGE_MAX, int(value)))


def percentage(counters: AttendanceCounters, provided_percentage: Optional[int] = None) -> int:
    """Overall attendance percentage in [0, 100].

    A provided percentage (e.g. straight from the API) wins and is clamped;
    None and PROVIDED_PERCENTAGE_SENTINEL both mean "not provided".
    Otherwise it is computed as round(present / total * 100), half-up, and an
    empty term (total <= 0) yields 0.
    """
    if provided_percentage is not None and int(provided_percentage) != PROVIDED_PERCENTAGE_SENTINEL:
        return clamp_percentage(provided_percentage)

    total = int(counters.total)
    if total <= 0:
        return 0

    # Integer form of floor(present * 100 / total + 0.5).
    present = int(counters.present)
    return clamp_percentage((present * 200 + total) // (2 * total))


def severity(missed_count: int) -> AttendanceSeverity:
    missed = max(0, int(missed_count))
    if missed >= EXCLUSION_MISSED_THRESHOLD:
        return AttendanceSeverity.EXCLUSION
    if missed >= WARNING_MISSED_THRESHOLD:
        return AttendanceSeverity.WARNING
    return AttendanceSeverity.SUCCESS

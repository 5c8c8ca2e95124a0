from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    """Normalize optional text fields: blank strings become None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "y"}:
        return True
    if text in {"", "0", "false", "no", "n"}:
        return False
    raise ValidationError(f"{field_name} is not a boolean: {value!r}")

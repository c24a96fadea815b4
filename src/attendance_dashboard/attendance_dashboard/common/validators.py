from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_INT_ID_RE = re.compile(r"0|[1-9][0-9]*")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_int_id(value, field_name: str = "id") -> int:
    """Plain ASCII digits only, no sign, padding or leading zeros."""
    text = "" if value is None else str(value)
    if not _INT_ID_RE.fullmatch(text):
        raise ValidationError(f"{field_name} is not a valid identifier")
    return int(text)

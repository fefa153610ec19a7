from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Optional[str], default: str) -> str:
    """Strip ``value``; blank or missing falls back to ``default``."""
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def require_date(value: Optional[str], field_name: str = "Date") -> date:
    if isinstance(value, date):
        return value
    text = require_non_empty(value, field_name)
    if not _ISO_DATE.fullmatch(text):
        raise ValidationError(f"{field_name} must be a valid YYYY-MM-DD date")
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid YYYY-MM-DD date") from None


def parse_status(value: Optional[str], *, default: Optional[AttendanceStatus] = None) -> AttendanceStatus:
    """Map user input onto AttendanceStatus (case-insensitive).

    Blank input returns ``default``; without a default it is a ValidationError.
    """
    if isinstance(value, AttendanceStatus):
        value = value.value
    text = (str(value) if value is not None else "").strip()
    if not text:
        if default is None:
            raise ValidationError("Status is required")
        return default
    for status in AttendanceStatus.choices():
        if status.value.lower() == text.lower():
            return status
    allowed = ", ".join(s.value for s in AttendanceStatus.choices())
    raise ValidationError(f"Status must be one of: {allowed}")

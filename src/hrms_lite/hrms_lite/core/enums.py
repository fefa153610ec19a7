from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status stored in the database."""

    PRESENT = "Present"
    ABSENT = "Absent"
    # Read-only: rows holding any other text (written before the status check existed).
    UNKNOWN = "Unknown"

    @classmethod
    def choices(cls) -> tuple["AttendanceStatus", ...]:
        """Values a caller may write."""
        return (cls.PRESENT, cls.ABSENT)

    @classmethod
    def from_db(cls, value) -> "AttendanceStatus":
        text = str(value or "").strip().lower()
        for status in cls.choices():
            if status.value.lower() == text:
                return status
        return cls.UNKNOWN


class MarkOutcome(str, Enum):
    """Whether marking attendance inserted a new record or changed an existing one."""

    CREATED = "created"
    UPDATED = "updated"

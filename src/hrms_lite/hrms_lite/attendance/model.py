from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's status for one calendar day."""

    record_id: int
    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class AttendanceView:
    """Read-model for the all-employees listing (record joined with its employee)."""

    record: AttendanceRecord
    full_name: str
    department: str

    def to_dict(self) -> dict:
        out = self.record.to_dict()
        out["full_name"] = self.full_name
        out["department"] = self.department
        return out


@dataclass(frozen=True)
class MarkInput:
    employee_id: Optional[str]
    date: Optional[str]
    status: Optional[str] = None

    @classmethod
    def from_json(cls, body: Mapping[str, Any] | None) -> "MarkInput":
        body = body if isinstance(body, Mapping) else {}

        def text(key: str) -> Optional[str]:
            value = body.get(key)
            return None if value is None else str(value)

        return cls(employee_id=text("employeeId"), date=text("date"), status=text("status"))

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object, no database access.
    """

    employee_id: str
    full_name: str
    email: str
    department: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "email": self.email,
            "department": self.department,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class EmployeeInput:
    """Validated-on-use request body for create/update."""

    full_name: Optional[str]
    employee_id: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None

    @classmethod
    def from_json(cls, body: Mapping[str, Any] | None) -> "EmployeeInput":
        body = body if isinstance(body, Mapping) else {}

        def text(key: str) -> Optional[str]:
            value = body.get(key)
            return None if value is None else str(value)

        return cls(
            full_name=text("fullName"),
            employee_id=text("employeeId"),
            email=text("email"),
            department=text("department"),
        )

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceView


class AttendanceRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        """Newest date first."""

        raise NotImplementedError

    def list_all_with_employee(self) -> Sequence[AttendanceView]:
        """Newest date first, then employee name A-Z."""

        raise NotImplementedError

    def upsert(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> bool:
        """Insert or update the (employee_id, work_date) slot in one step.

        Returns True when a new record was inserted. A missing employee raises
        ReferentialError.
        """

        raise NotImplementedError

    def update_status(self, *, record_id: int, status: AttendanceStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError

    def delete_for_employee_and_date(self, employee_id: str, work_date: date) -> bool:
        raise NotImplementedError

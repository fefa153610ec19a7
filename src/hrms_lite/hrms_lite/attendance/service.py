from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from ..common.validators import parse_status, require_date, require_non_empty
from ..core.enums import AttendanceStatus, MarkOutcome
from ..core.exceptions import NotFoundError, ReferentialError, StoreError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, AttendanceView, MarkInput
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: the attendance ledger (one record per employee per day)."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(employee_id)

    def list_all(self) -> Sequence[AttendanceView]:
        return self._attendance.list_all_with_employee()

    def mark(self, data: MarkInput) -> Tuple[AttendanceRecord, MarkOutcome]:
        employee_id = require_non_empty(data.employee_id, "Employee ID")
        work_date = require_date(data.date, "Date")

        if not self._employees.get_by_id(employee_id):
            raise ReferentialError(f"Employee with ID {employee_id} does not exist")

        status = parse_status(data.status, default=AttendanceStatus.PRESENT)

        try:
            created = self._attendance.upsert(employee_id=employee_id, work_date=work_date, status=status)
        except ReferentialError:
            # The employee was deleted between the check and the write.
            raise ReferentialError(f"Employee with ID {employee_id} does not exist") from None

        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if record is None:
            raise StoreError(f"Attendance for {employee_id} on {work_date} was not found after write")

        outcome = MarkOutcome.CREATED if created else MarkOutcome.UPDATED
        logger.info("Attendance %s: %s %s -> %s", outcome.value, employee_id, work_date, status.value)
        return record, outcome

    def update_status(self, record_id: int, status: Optional[str]) -> AttendanceRecord:
        new_status = parse_status(status)

        if not self._attendance.get_by_id(record_id):
            raise NotFoundError("Attendance record not found")
        if not self._attendance.update_status(record_id=record_id, status=new_status):
            raise NotFoundError("Attendance record not found")

        record = self._attendance.get_by_id(record_id)
        if record is None:
            raise NotFoundError("Attendance record not found")
        logger.info("Attendance record %s set to %s", record_id, new_status.value)
        return record

    def delete_record(self, record_id: int) -> None:
        if not self._attendance.delete_by_id(record_id):
            raise NotFoundError("Attendance record not found")
        logger.info("Attendance record %s deleted", record_id)

    def delete_for_date(self, employee_id: str, date: Optional[str]) -> None:
        employee_id = require_non_empty(employee_id, "Employee ID")
        work_date = require_date(date, "Date")
        if not self._attendance.delete_for_employee_and_date(employee_id, work_date):
            raise NotFoundError("Attendance record not found")
        logger.info("Attendance for %s on %s deleted", employee_id, work_date)

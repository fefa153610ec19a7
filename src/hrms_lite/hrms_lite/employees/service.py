from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import EmployeeIdGenerator
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_DEPARTMENT, DEFAULT_EMAIL
from ..core.exceptions import ConflictError, NotFoundError, StoreError
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: maintain the employee directory."""

    def __init__(self, employees: EmployeeRepository, *, id_generator: Optional[Callable[[], str]] = None):
        self._employees = employees
        self._new_id = id_generator or EmployeeIdGenerator()

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def create_employee(self, data: EmployeeInput) -> Employee:
        full_name = require_non_empty(data.full_name, "Full name")
        employee_id = optional_text(data.employee_id, "") or self._new_id()
        email = optional_text(data.email, DEFAULT_EMAIL)
        department = optional_text(data.department, DEFAULT_DEPARTMENT)

        if self._employees.get_by_id(employee_id):
            raise ConflictError(f"Employee with ID {employee_id} already exists")

        try:
            self._employees.create(employee_id=employee_id, full_name=full_name, email=email, department=department)
        except ConflictError:
            # Lost a race with a concurrent insert of the same id.
            raise ConflictError(f"Employee with ID {employee_id} already exists") from None

        created = self._employees.get_by_id(employee_id)
        if created is None:
            raise StoreError(f"Employee {employee_id} was not found after insert")
        logger.info("Employee %s created (%s)", employee_id, department)
        return created

    def update_employee(self, employee_id: str, data: EmployeeInput) -> Employee:
        full_name = require_non_empty(data.full_name, "Full name")
        email = optional_text(data.email, DEFAULT_EMAIL)
        department = optional_text(data.department, DEFAULT_DEPARTMENT)

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        if not self._employees.update(
            employee_id=employee_id, full_name=full_name, email=email, department=department
        ):
            raise NotFoundError("Employee not found")

        updated = self._employees.get_by_id(employee_id)
        if updated is None:
            raise NotFoundError("Employee not found")
        logger.info("Employee %s updated", employee_id)
        return updated

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Employee %s deleted with attendance history", employee_id)

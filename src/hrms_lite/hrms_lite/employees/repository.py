from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this protocol, not on a concrete database.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, employee_id: str, full_name: str, email: str, department: str) -> None:
        """Insert a row; a duplicate id raises ConflictError."""

        raise NotImplementedError

    def update(self, *, employee_id: str, full_name: str, email: str, department: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        """Delete the employee; attendance rows go with it (ON DELETE CASCADE)."""

        raise NotImplementedError

from __future__ import annotations

import re

import pytest

from src.hrms_lite.hrms_lite.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.hrms_lite.hrms_lite.core.enums import AttendanceStatus
from src.hrms_lite.hrms_lite.attendance.model import MarkInput
from src.hrms_lite.hrms_lite.employees.model import EmployeeInput
from src.hrms_lite.hrms_lite.employees.service import EmployeeService


@pytest.mark.parametrize("full_name", [None, "", "   ", "\t\n"])
def test_create_requires_full_name(employee_service, full_name):
    with pytest.raises(ValidationError):
        employee_service.create_employee(
            EmployeeInput(employee_id="EMP1", full_name=full_name, email="a@x.com", department="Ops")
        )
    assert employee_service.list_employees() == []


def test_create_applies_defaults_and_strips(employee_service):
    emp = employee_service.create_employee(EmployeeInput(full_name="  Ann Lee  ", email="  ", department=""))

    assert emp.full_name == "Ann Lee"
    assert emp.email == ""
    assert emp.department == "General"
    assert re.fullmatch(r"EMP\d+", emp.employee_id)
    assert emp.created_at is not None


def test_generated_ids_differ_between_calls(employee_service):
    first = employee_service.create_employee(EmployeeInput(employee_id=None, full_name="X"))
    second = employee_service.create_employee(EmployeeInput(employee_id=None, full_name="X"))

    assert first.employee_id != second.employee_id
    assert re.fullmatch(r"EMP\d+", second.employee_id)


def test_duplicate_id_is_conflict(employee_service):
    employee_service.create_employee(EmployeeInput(employee_id="EMP100", full_name="Ann Lee"))

    with pytest.raises(ConflictError, match="EMP100 already exists"):
        employee_service.create_employee(EmployeeInput(employee_id="EMP100", full_name="Someone Else"))

    assert [e.full_name for e in employee_service.list_employees()] == ["Ann Lee"]


class RacingEmployees:
    """Lookup says the id is free, insert then hits the primary key."""

    def get_by_id(self, employee_id):
        return None

    def create(self, **kwargs):
        raise ConflictError("Duplicate key: PRIMARY")


def test_store_duplicate_key_translates_to_conflict():
    service = EmployeeService(RacingEmployees())

    with pytest.raises(ConflictError, match="Employee with ID EMP7 already exists"):
        service.create_employee(EmployeeInput(employee_id="EMP7", full_name="Late Comer"))


def test_round_trip_through_get(employee_service):
    created = employee_service.create_employee(
        EmployeeInput(employee_id="EMP100", full_name="Ann Lee", email="ann@x.com", department="Ops")
    )

    fetched = employee_service.get_employee("EMP100")
    assert fetched == created
    assert (fetched.full_name, fetched.email, fetched.department) == ("Ann Lee", "ann@x.com", "Ops")


def test_get_missing_returns_none(employee_service):
    assert employee_service.get_employee("nope") is None


def test_list_is_newest_first(employee_service):
    for i in range(3):
        employee_service.create_employee(EmployeeInput(employee_id=f"EMP{i}", full_name=f"Person {i}"))

    assert [e.employee_id for e in employee_service.list_employees()] == ["EMP2", "EMP1", "EMP0"]


def test_update_keeps_id_and_created_at(employee_service):
    created = employee_service.create_employee(
        EmployeeInput(employee_id="EMP100", full_name="Ann Lee", email="ann@x.com", department="Ops")
    )

    updated = employee_service.update_employee("EMP100", EmployeeInput(full_name="Ann Smith", department="HR"))

    assert updated.employee_id == "EMP100"
    assert updated.created_at == created.created_at
    assert updated.full_name == "Ann Smith"
    assert updated.email == ""
    assert updated.department == "HR"


def test_update_missing_employee(employee_service):
    with pytest.raises(NotFoundError):
        employee_service.update_employee("EMP404", EmployeeInput(full_name="Nobody"))


def test_update_requires_full_name(employee_service):
    employee_service.create_employee(EmployeeInput(employee_id="EMP1", full_name="Ann"))

    with pytest.raises(ValidationError):
        employee_service.update_employee("EMP1", EmployeeInput(full_name=" "))
    assert employee_service.get_employee("EMP1").full_name == "Ann"


def test_delete_missing_employee(employee_service):
    with pytest.raises(NotFoundError):
        employee_service.delete_employee("EMP404")


def test_delete_cascades_attendance(employee_service, attendance_service):
    employee_service.create_employee(EmployeeInput(employee_id="EMP1", full_name="Ann"))
    employee_service.create_employee(EmployeeInput(employee_id="EMP2", full_name="Bob"))
    for day in ("2024-01-01", "2024-01-02", "2024-01-03"):
        attendance_service.mark(MarkInput(employee_id="EMP1", date=day, status="Absent"))
    attendance_service.mark(MarkInput(employee_id="EMP2", date="2024-01-01"))

    employee_service.delete_employee("EMP1")

    assert employee_service.get_employee("EMP1") is None
    assert attendance_service.list_for_employee("EMP1") == []
    remaining = attendance_service.list_all()
    assert [v.record.employee_id for v in remaining] == ["EMP2"]
    assert remaining[0].record.status == AttendanceStatus.PRESENT

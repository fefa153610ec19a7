from __future__ import annotations

from datetime import date, datetime, timedelta
from itertools import count
from typing import Optional

import pytest

from src.hrms_lite.hrms_lite.attendance.model import AttendanceRecord, AttendanceView
from src.hrms_lite.hrms_lite.container import build_services
from src.hrms_lite.hrms_lite.core.enums import AttendanceStatus
from src.hrms_lite.hrms_lite.core.exceptions import ConflictError, ReferentialError
from src.hrms_lite.hrms_lite.employees.model import Employee


class InMemoryStore:
    """Both tables, with the PK/unique/FK-cascade behaviour of schema.sql."""

    def __init__(self):
        self.employees: dict[str, Employee] = {}
        self.attendance: dict[int, AttendanceRecord] = {}
        self._ids = count(1)
        self._clock = datetime(2024, 1, 1, 9, 0, 0)

    def tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def next_id(self) -> int:
        return next(self._ids)


class InMemoryEmployees:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._store.employees.get(employee_id)

    def list_all(self):
        return sorted(
            self._store.employees.values(),
            key=lambda e: (e.created_at, e.employee_id),
            reverse=True,
        )

    def create(self, *, employee_id, full_name, email, department) -> None:
        if employee_id in self._store.employees:
            raise ConflictError(f"Duplicate key: {employee_id}")
        self._store.employees[employee_id] = Employee(
            employee_id=employee_id,
            full_name=full_name,
            email=email,
            department=department,
            created_at=self._store.tick(),
        )

    def update(self, *, employee_id, full_name, email, department) -> bool:
        current = self._store.employees.get(employee_id)
        if current is None:
            return False
        self._store.employees[employee_id] = Employee(
            employee_id=employee_id,
            full_name=full_name,
            email=email,
            department=department,
            created_at=current.created_at,
        )
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        if self._store.employees.pop(employee_id, None) is None:
            return False
        for rid, rec in list(self._store.attendance.items()):
            if rec.employee_id == employee_id:
                del self._store.attendance[rid]
        return True


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._store.attendance.get(int(record_id))

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for rec in self._store.attendance.values():
            if rec.employee_id == employee_id and rec.work_date == work_date:
                return rec
        return None

    def list_for_employee(self, employee_id: str):
        items = [r for r in self._store.attendance.values() if r.employee_id == employee_id]
        return sorted(items, key=lambda r: r.work_date, reverse=True)

    def list_all_with_employee(self):
        rows = []
        for rec in self._store.attendance.values():
            emp = self._store.employees[rec.employee_id]
            rows.append(AttendanceView(record=rec, full_name=emp.full_name, department=emp.department))
        rows.sort(key=lambda v: v.full_name)
        rows.sort(key=lambda v: v.record.work_date, reverse=True)
        return rows

    def upsert(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> bool:
        if employee_id not in self._store.employees:
            raise ReferentialError("Referenced row does not exist")
        existing = self.get_for_employee_and_date(employee_id, work_date)
        if existing:
            self._replace(existing, status)
            return False
        rid = self._store.next_id()
        self._store.attendance[rid] = AttendanceRecord(
            record_id=rid,
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            created_at=self._store.tick(),
        )
        return True

    def update_status(self, *, record_id: int, status: AttendanceStatus) -> bool:
        existing = self._store.attendance.get(int(record_id))
        if existing is None:
            return False
        self._replace(existing, status)
        return True

    def delete_by_id(self, record_id: int) -> bool:
        return self._store.attendance.pop(int(record_id), None) is not None

    def delete_for_employee_and_date(self, employee_id: str, work_date: date) -> bool:
        existing = self.get_for_employee_and_date(employee_id, work_date)
        if existing is None:
            return False
        del self._store.attendance[existing.record_id]
        return True

    def _replace(self, rec: AttendanceRecord, status: AttendanceStatus) -> None:
        self._store.attendance[rec.record_id] = AttendanceRecord(
            record_id=rec.record_id,
            employee_id=rec.employee_id,
            work_date=rec.work_date,
            status=status,
            created_at=rec.created_at,
        )


class SequenceIds:
    """Deterministic stand-in for the time-based employee id generator."""

    def __init__(self, start: int = 1704441600000):
        self._next = start

    def __call__(self) -> str:
        value = self._next
        self._next += 1
        return f"EMP{value}"


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def container(store):
    return build_services(InMemoryEmployees(store), InMemoryAttendance(store), id_generator=SequenceIds())


@pytest.fixture
def employee_service(container):
    return container.employee_service


@pytest.fixture
def attendance_service(container):
    return container.attendance_service


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.hrms_lite.hrms_lite.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()

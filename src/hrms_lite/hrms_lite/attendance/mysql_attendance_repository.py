from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceRecord, AttendanceView
from .repository import AttendanceRepository

_COLUMNS = "a.id, a.employee_id, a.work_date, a.status, a.created_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["id"]),
        employee_id=str(r["employee_id"]),
        work_date=normalize_mysql_date(r["work_date"]),
        status=AttendanceStatus.from_db(r["status"]),
        created_at=r["created_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance a WHERE a.id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance a WHERE a.employee_id=%s AND a.work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.employee_id=%s
                ORDER BY a.work_date DESC
                """,
                (employee_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_all_with_employee(self) -> Sequence[AttendanceView]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, e.full_name, e.department
                FROM attendance a
                JOIN employees e ON e.employee_id = a.employee_id
                ORDER BY a.work_date DESC, e.full_name ASC
                """
            )
            return [
                AttendanceView(record=_to_record(r), full_name=r["full_name"], department=r["department"])
                for r in fetchall(cur)
            ]

    def upsert(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, work_date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (employee_id, work_date, status.value),
            )
            # MySQL reports 1 for an insert, 2 for a changed row, 0 for an unchanged one.
            return cur.rowcount == 1

    def update_status(self, *, record_id: int, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE attendance SET status=%s WHERE id=%s", (status.value, int(record_id)))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM attendance WHERE id=%s", (int(record_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0

    def delete_for_employee_and_date(self, employee_id: str, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE employee_id=%s AND work_date=%s", (employee_id, work_date))
            return cur.rowcount > 0

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def build_services(
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    id_generator=None,
) -> Container:
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=EmployeeService(employees_repo, id_generator=id_generator),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
    )


def build_container(*, db_config: dict, pool_size: int = DEFAULT_POOL_SIZE) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config), pool_size=pool_size)
    return build_services(
        MySQLEmployeeRepository(conn),
        MySQLAttendanceRepository(conn),
        conn=conn,
    )

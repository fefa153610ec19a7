"""Interactive helper: add employees one by one from the terminal.

Blank answers fall back to the service defaults (generated id, General
department); a blank name is recorded as "Unknown".
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Callable

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hrms_lite.hrms_lite.container import build_container
from src.hrms_lite.hrms_lite.core.exceptions import DomainError
from src.hrms_lite.hrms_lite.employees.model import EmployeeInput
from src.hrms_lite.hrms_lite.employees.service import EmployeeService


def prompt_employee(ask: Callable[[str], str] = input) -> EmployeeInput:
    employee_id = ask("Employee ID: ").strip()
    full_name = ask("Full Name: ").strip() or "Unknown"
    email = ask("Email: ").strip()
    department = ask("Department: ").strip()
    return EmployeeInput(
        employee_id=employee_id or None,
        full_name=full_name,
        email=email or None,
        department=department or None,
    )


def run(service: EmployeeService, ask: Callable[[str], str] = input) -> int:
    """Prompt until the operator declines; returns how many employees were added."""
    added = 0
    while True:
        data = prompt_employee(ask)
        try:
            employee = service.create_employee(data)
        except DomainError as e:
            print(f"ERROR: {e}")
        else:
            added += 1
            print("Employee added:")
            print(f"  Employee ID: {employee.employee_id}")
            print(f"  Full Name:   {employee.full_name}")
            print(f"  Email:       {employee.email}")
            print(f"  Department:  {employee.department}")

        if ask("Add another employee? (y/n): ").strip().lower() not in {"y", "yes"}:
            return added
        print("-" * 50)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))
    print("=" * 50)
    print("HRMS Lite - Add Employee")
    print("=" * 50)
    try:
        added = run(container.employee_service)
    finally:
        container.close()
    print(f"Done ({added} added).")


if __name__ == "__main__":
    main()

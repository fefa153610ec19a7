from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hrms_lite.hrms_lite.container import build_container
from src.hrms_lite.hrms_lite.core.exceptions import ConflictError
from src.hrms_lite.hrms_lite.employees.model import EmployeeInput
from src.hrms_lite.hrms_lite.employees.service import EmployeeService

SAMPLE_EMPLOYEES = [
    EmployeeInput(employee_id="EMP001", full_name="John Doe", email="john.doe@company.com", department="Engineering"),
    EmployeeInput(employee_id="EMP002", full_name="Jane Smith", email="jane.smith@company.com", department="Marketing"),
    EmployeeInput(employee_id="EMP003", full_name="Bob Johnson", email="bob.johnson@company.com", department="Sales"),
    EmployeeInput(employee_id="EMP004", full_name="Alice Williams", email="alice.williams@company.com", department="HR"),
    EmployeeInput(employee_id="EMP005", full_name="Charlie Brown", email="charlie.brown@company.com", department="Finance"),
]


def seed_employees(service: EmployeeService, employees=SAMPLE_EMPLOYEES) -> tuple[int, int]:
    """Create each employee unless its id is taken; returns (added, skipped)."""
    added = skipped = 0
    for data in employees:
        try:
            employee = service.create_employee(data)
        except ConflictError:
            print(f"SKIP: {data.employee_id} already exists")
            skipped += 1
            continue
        print(f"ADD:  {employee.employee_id} - {employee.full_name} ({employee.department})")
        added += 1
    return added, skipped


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))
    try:
        added, skipped = seed_employees(container.employee_service)
    finally:
        container.close()
    print(f"OK: Seeded database (added={added}, skipped={skipped})")


if __name__ == "__main__":
    main()

from __future__ import annotations

from scripts.add_employee import run
from scripts.seed_db import SAMPLE_EMPLOYEES, seed_employees

from src.hrms_lite.hrms_lite.employees.model import EmployeeInput


def test_seed_skips_existing(employee_service):
    employee_service.create_employee(EmployeeInput(employee_id="EMP002", full_name="Already Here"))

    added, skipped = seed_employees(employee_service)

    assert (added, skipped) == (len(SAMPLE_EMPLOYEES) - 1, 1)
    assert employee_service.get_employee("EMP002").full_name == "Already Here"
    assert employee_service.get_employee("EMP005").department == "Finance"


def test_interactive_add_uses_defaults(employee_service):
    answers = iter(["", "", "", "", "y", "EMP9", "Ann", "ann@x.com", "Ops", "n"])

    added = run(employee_service, ask=lambda _prompt: next(answers))

    assert added == 2
    ann = employee_service.get_employee("EMP9")
    assert (ann.full_name, ann.email, ann.department) == ("Ann", "ann@x.com", "Ops")
    unnamed = [e for e in employee_service.list_employees() if e.employee_id != "EMP9"][0]
    assert unnamed.full_name == "Unknown"
    assert unnamed.department == "General"


def test_interactive_add_reports_duplicate(employee_service, capsys):
    employee_service.create_employee(EmployeeInput(employee_id="EMP1", full_name="Ann"))
    answers = iter(["EMP1", "Bob", "", "", "no"])

    added = run(employee_service, ask=lambda _prompt: next(answers))

    assert added == 0
    assert "EMP1 already exists" in capsys.readouterr().out

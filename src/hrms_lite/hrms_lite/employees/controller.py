from __future__ import annotations

from flask import Flask, request

from ..common.responses import error_response, fail, ok
from ..container import Container
from .model import EmployeeInput


def register(app: Flask, container: Container, *, prefix: str = "") -> None:
    service = container.employee_service

    @app.route(f"{prefix}/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = service.list_employees()
            return ok([e.to_dict() for e in employees])
        except Exception as e:
            return error_response(e, action="Failed to fetch employees")

    @app.route(f"{prefix}/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        try:
            employee = service.get_employee(employee_id)
            if employee is None:
                return fail("Employee not found", status=404)
            return ok(employee.to_dict())
        except Exception as e:
            return error_response(e, action="Failed to fetch employee")

    @app.route(f"{prefix}/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        try:
            data = EmployeeInput.from_json(request.get_json(silent=True))
            employee = service.create_employee(data)
            return ok(employee.to_dict(), message="Employee added successfully", status=201)
        except Exception as e:
            return error_response(e, action="Failed to add employee")

    @app.route(f"{prefix}/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        try:
            data = EmployeeInput.from_json(request.get_json(silent=True))
            employee = service.update_employee(employee_id, data)
            return ok(employee.to_dict(), message="Employee updated successfully")
        except Exception as e:
            return error_response(e, action="Failed to update employee")

    @app.route(f"{prefix}/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        try:
            service.delete_employee(employee_id)
            return ok(message="Employee deleted successfully")
        except Exception as e:
            return error_response(e, action="Failed to delete employee")

from __future__ import annotations

from flask import Flask, request

from ..common.responses import error_response, ok
from ..container import Container
from ..core.enums import MarkOutcome
from .model import MarkInput


def register(app: Flask, container: Container, *, prefix: str = "") -> None:
    service = container.attendance_service

    @app.route(f"{prefix}/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        try:
            rows = service.list_all()
            return ok([r.to_dict() for r in rows])
        except Exception as e:
            return error_response(e, action="Failed to fetch attendance records")

    @app.route(f"{prefix}/attendance/<employee_id>", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: str):
        try:
            records = service.list_for_employee(employee_id)
            return ok([r.to_dict() for r in records])
        except Exception as e:
            return error_response(e, action="Failed to fetch attendance records")

    @app.route(f"{prefix}/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            data = MarkInput.from_json(request.get_json(silent=True))
            record, outcome = service.mark(data)
            if outcome == MarkOutcome.CREATED:
                return ok(record.to_dict(), message="Attendance marked successfully", status=201)
            return ok(record.to_dict(), message="Attendance updated successfully")
        except Exception as e:
            return error_response(e, action="Failed to mark attendance")

    @app.route(f"{prefix}/attendance/<int:record_id>", methods=["PUT"], endpoint="update_attendance")
    def update_attendance(record_id: int):
        try:
            body = request.get_json(silent=True)
            status = body.get("status") if isinstance(body, dict) else None
            record = service.update_status(record_id, status)
            return ok(record.to_dict(), message="Attendance updated successfully")
        except Exception as e:
            return error_response(e, action="Failed to update attendance")

    @app.route(f"{prefix}/attendance/<int:record_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(record_id: int):
        try:
            service.delete_record(record_id)
            return ok(message="Attendance record deleted successfully")
        except Exception as e:
            return error_response(e, action="Failed to delete attendance")

    @app.route(
        f"{prefix}/attendance/<employee_id>/<work_date>",
        methods=["DELETE"],
        endpoint="delete_attendance_for_date",
    )
    def delete_attendance_for_date(employee_id: str, work_date: str):
        try:
            service.delete_for_date(employee_id, work_date)
            return ok(message="Attendance record deleted successfully")
        except Exception as e:
            return error_response(e, action="Failed to delete attendance")

from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_clock_time, parse_iso_date, today_local
from ..common.http import get_json_body, json_endpoint
from ..common.validators import require_int
from ..core.exceptions import AttendanceNotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _date_or_today(value) -> date:
        return parse_iso_date(value) if value else today_local()

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @json_endpoint
    def attendance_mark():
        data = get_json_body()
        if data.get("employee_id") is None:
            raise ValidationError("employee_id is required")

        record = service.mark_attendance(
            require_int(data["employee_id"], "employee_id"),
            _date_or_today(data.get("date")),
            parse_clock_time(data.get("clock_in")),
            parse_clock_time(data.get("clock_out")),
        )
        return jsonify({"success": True, "data": record.to_dict()})

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_by_date")
    @json_endpoint
    def attendance_by_date():
        work_date = _date_or_today(request.args.get("date"))
        records = service.get_attendance_by_date(work_date)
        return jsonify({"success": True, "date": work_date.isoformat(), "data": [r.to_dict() for r in records]})

    @app.route("/api/attendance/<int:attendance_id>", methods=["GET"], endpoint="attendance_get")
    @json_endpoint
    def attendance_get(attendance_id: int):
        record = service.get_attendance_by_id(attendance_id)
        if not record:
            raise AttendanceNotFoundError(attendance_id)
        return jsonify({"success": True, "data": record.to_dict()})

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="attendance_history")
    @json_endpoint
    def attendance_history(employee_id: int):
        # Unknown employees get a 404 rather than an empty history.
        container.employee_service.get(employee_id)
        records = service.get_attendance_history(employee_id)
        return jsonify({"success": True, "data": [r.to_dict() for r in records]})

    @app.route("/api/attendance/initialize", methods=["POST"], endpoint="attendance_initialize")
    @json_endpoint
    def attendance_initialize():
        data = get_json_body()
        work_date = _date_or_today(data.get("date"))
        records = service.initialize_attendance_for_date(work_date)
        return jsonify({"success": True, "date": work_date.isoformat(), "data": [r.to_dict() for r in records]})

    @app.route("/api/attendance/<int:attendance_id>/absent", methods=["POST"], endpoint="attendance_absent")
    @json_endpoint
    def attendance_absent(attendance_id: int):
        record = service.mark_absent_by_id(attendance_id)
        return jsonify({"success": True, "data": record.to_dict(), "employee": record.employee.to_dict()})

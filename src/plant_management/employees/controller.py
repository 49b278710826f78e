from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import get_json_body, json_endpoint
from ..common.validators import require_int
from ..core.constants import DEFAULT_ABSENCES, DEFAULT_LEAVES
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _optional_int(data: dict, key: str):
        value = data.get(key)
        return None if value is None else require_int(value, key)

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @json_endpoint
    def employees_list():
        return jsonify({"success": True, "data": [e.to_dict() for e in service.list_all()]})

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @json_endpoint
    def employees_create():
        data = get_json_body()
        employee = service.create(
            full_name=data.get("full_name", ""),
            supervisor_id=_optional_int(data, "supervisor_id"),
            leaves=data.get("leaves", DEFAULT_LEAVES),
            absences=data.get("absences", DEFAULT_ABSENCES),
        )
        return jsonify({"success": True, "data": employee.to_dict()}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    @json_endpoint
    def employees_get(employee_id: int):
        return jsonify({"success": True, "data": service.get(employee_id).to_dict()})

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="employees_update")
    @json_endpoint
    def employees_update(employee_id: int):
        data = get_json_body()
        employee = service.update(
            employee_id,
            full_name=data.get("full_name"),
            supervisor_id=_optional_int(data, "supervisor_id"),
            leaves=_optional_int(data, "leaves"),
            absences=_optional_int(data, "absences"),
        )
        return jsonify({"success": True, "data": employee.to_dict()})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @json_endpoint
    def employees_delete(employee_id: int):
        service.delete(employee_id)
        return jsonify({"success": True})

    @app.route("/api/supervisors/<int:supervisor_id>/employees", methods=["GET"], endpoint="supervisor_employees")
    @json_endpoint
    def supervisor_employees(supervisor_id: int):
        employees = service.list_for_supervisor(supervisor_id)
        return jsonify({"success": True, "data": [e.to_dict() for e in employees]})

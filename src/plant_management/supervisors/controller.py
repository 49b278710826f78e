from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import get_json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.supervisor_service

    @app.route("/api/supervisors", methods=["GET"], endpoint="supervisors_list")
    @json_endpoint
    def supervisors_list():
        return jsonify({"success": True, "data": [s.to_dict() for s in service.list_all()]})

    @app.route("/api/supervisors", methods=["POST"], endpoint="supervisors_create")
    @json_endpoint
    def supervisors_create():
        data = get_json_body()
        supervisor = service.create(full_name=data.get("full_name", ""), email=data.get("email"))
        return jsonify({"success": True, "data": supervisor.to_dict()}), 201

    @app.route("/api/supervisors/<int:supervisor_id>", methods=["GET"], endpoint="supervisors_get")
    @json_endpoint
    def supervisors_get(supervisor_id: int):
        return jsonify({"success": True, "data": service.get(supervisor_id).to_dict()})

    @app.route("/api/supervisors/<int:supervisor_id>", methods=["PUT"], endpoint="supervisors_update")
    @json_endpoint
    def supervisors_update(supervisor_id: int):
        data = get_json_body()
        supervisor = service.update(supervisor_id, full_name=data.get("full_name"), email=data.get("email"))
        return jsonify({"success": True, "data": supervisor.to_dict()})

    @app.route("/api/supervisors/<int:supervisor_id>", methods=["DELETE"], endpoint="supervisors_delete")
    @json_endpoint
    def supervisors_delete(supervisor_id: int):
        service.delete(supervisor_id)
        return jsonify({"success": True})

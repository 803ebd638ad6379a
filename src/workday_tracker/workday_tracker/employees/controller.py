from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import employee_to_json
from ..common.validators import require_mapping
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        return jsonify([employee_to_json(e) for e in svc.list_all()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        payload = require_mapping(request.get_json(silent=True) or {}, "Request body")
        employee = svc.create(name=payload.get("name", ""), daily_rate=payload.get("dailyRate"))
        return jsonify(employee_to_json(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    def employees_get(employee_id: str):
        return jsonify(employee_to_json(svc.get(employee_id)))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    def employees_update(employee_id: str):
        payload = require_mapping(request.get_json(silent=True) or {}, "Request body")
        employee = svc.update(employee_id, name=payload.get("name"), daily_rate=payload.get("dailyRate"))
        return jsonify(employee_to_json(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: str):
        svc.delete(employee_id)
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>/advances", methods=["POST"], endpoint="employees_advance")
    def employees_advance(employee_id: str):
        payload = require_mapping(request.get_json(silent=True) or {}, "Request body")
        employee = svc.add_advance(employee_id, payload.get("amount"))
        return jsonify(employee_to_json(employee))

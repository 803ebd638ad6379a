from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import client_to_json
from ..common.validators import require_mapping
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.client_service

    @app.route("/api/clients", methods=["GET"], endpoint="clients_list")
    def clients_list():
        return jsonify([client_to_json(c) for c in svc.list_all()])

    @app.route("/api/clients", methods=["POST"], endpoint="clients_create")
    def clients_create():
        payload = require_mapping(request.get_json(silent=True) or {}, "Request body")
        client = svc.create(name=payload.get("name", ""), location=payload.get("location", ""))
        return jsonify(client_to_json(client)), 201

    @app.route("/api/clients/<client_id>", methods=["PUT"], endpoint="clients_update")
    def clients_update(client_id: str):
        payload = require_mapping(request.get_json(silent=True) or {}, "Request body")
        client = svc.update(client_id, name=payload.get("name"), location=payload.get("location"))
        return jsonify(client_to_json(client))

    @app.route("/api/clients/<client_id>", methods=["DELETE"], endpoint="clients_delete")
    def clients_delete(client_id: str):
        svc.delete(client_id)
        return jsonify({"success": True})

from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import settings_to_json
from ..common.validators import require_mapping
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.settings_service

    @app.route("/api/settings", methods=["GET"], endpoint="settings_get")
    def settings_get():
        return jsonify(settings_to_json(svc.get()))

    @app.route("/api/settings", methods=["PUT"], endpoint="settings_update")
    def settings_update():
        payload = require_mapping(request.get_json(silent=True) or {}, "Request body")
        return jsonify(settings_to_json(svc.update(language=payload.get("language"), theme=payload.get("theme"))))

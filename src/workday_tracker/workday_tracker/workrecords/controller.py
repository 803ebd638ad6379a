from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import work_record_to_json
from ..common.validators import require_mapping
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.work_day_service

    @app.route("/api/employees/<employee_id>/records", methods=["GET"], endpoint="records_list")
    def records_list(employee_id: str):
        return jsonify([work_record_to_json(r) for r in svc.list_for_employee(employee_id)])

    @app.route("/api/employees/<employee_id>/records/<work_date>", methods=["PUT"], endpoint="records_save")
    def records_save(employee_id: str, work_date: str):
        payload = require_mapping(request.get_json(silent=True) or {}, "Request body")
        record = svc.save_work_day(
            employee_id=employee_id,
            work_date=work_date,
            client_ids=payload.get("clientIds", []),
            is_absence=False if payload.get("isAbsence") is None else payload["isAbsence"],
            client_hours=payload.get("clientHours"),
            client_shifts=payload.get("clientShifts"),
            daily_advance=payload.get("dailyAdvance"),
            advance_amount=payload.get("advanceAmount"),
        )
        if record is None:
            return jsonify({"success": True, "record": None})
        return jsonify({"success": True, "record": work_record_to_json(record)})

    @app.route("/api/employees/<employee_id>/records/<work_date>", methods=["DELETE"], endpoint="records_clear")
    def records_clear(employee_id: str, work_date: str):
        return jsonify({"success": True, "cleared": svc.clear_day(employee_id, work_date)})

    @app.route("/api/employees/<employee_id>/calendar/<int:year>/<int:month>", methods=["GET"], endpoint="records_calendar")
    def records_calendar(employee_id: str, year: int, month: int):
        marks = svc.day_markers(employee_id, year, month)
        return jsonify({d: {"marker": m.marker.value, "clientCount": m.client_count} for d, m in marks.items()})

from __future__ import annotations

import csv
import io

from flask import Flask, current_app, jsonify

from ..common.datetime_utils import now_local
from ..common.serializers import employee_stats_to_json, fleet_totals_to_json, json_number, monthly_stats_to_json
from ..container import Container
from .advances import monthly_advances
from .service import compute_fleet_totals


def register(app: Flask, container: Container) -> None:
    svc = container.earnings_report_service

    def _currency() -> str:
        return current_app.config.get("CURRENCY", "MAD")

    def _write_report_csv(*, rows: list[dict], filename: str):
        """Write per-employee report rows to a CSV response."""

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=[
                "employee_id",
                "name",
                "daily_rate",
                "last15_work_days",
                "last15_earnings",
                "month_work_days",
                "month_earnings",
                "advances",
                "net_earnings",
            ],
        )
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/employees/<employee_id>/stats", methods=["GET"], endpoint="employee_stats")
    def employee_stats(employee_id: str):
        employee = container.employee_service.get(employee_id)
        stats = svc.compute_employee_stats(employee)
        body = employee_stats_to_json(stats)
        body["netEarnings"] = json_number(stats.current_month.total_earnings - employee.advances)
        body["currency"] = _currency()
        return jsonify(body)

    @app.route("/api/employees/<employee_id>/stats/<int:year>/<int:month>", methods=["GET"], endpoint="employee_monthly_stats")
    def employee_monthly_stats(employee_id: str, year: int, month: int):
        stats = svc.monthly_stats_for_employee_id(employee_id, year, month)
        records = container.work_records_repo.get_by_employee(employee_id)
        body = monthly_stats_to_json(stats)
        body["recordAdvances"] = json_number(monthly_advances(records, year, month))
        body["currency"] = _currency()
        return jsonify(body)

    @app.route("/api/reports/totals", methods=["GET"], endpoint="report_totals")
    def report_totals():
        employees, stats = svc.all_employee_stats()
        totals = compute_fleet_totals(employees, stats)
        return jsonify(
            {
                "totals": fleet_totals_to_json(totals),
                "employees": [employee_stats_to_json(s) for s in stats],
                "currency": _currency(),
            }
        )

    @app.route("/api/reports/employees.csv", methods=["GET"], endpoint="report_employees_csv")
    def report_employees_csv():
        employees, stats = svc.all_employee_stats()
        rows = []
        for e, s in zip(employees, stats):
            rows.append(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "daily_rate": json_number(e.daily_rate),
                    "last15_work_days": s.last_15_days.work_days,
                    "last15_earnings": json_number(s.last_15_days.total_earnings),
                    "month_work_days": s.current_month.work_days,
                    "month_earnings": json_number(s.current_month.total_earnings),
                    "advances": json_number(e.advances),
                    "net_earnings": json_number(s.current_month.total_earnings - e.advances),
                }
            )
        filename = f"earnings_{now_local().strftime('%Y%m%d')}.csv"
        return _write_report_csv(rows=rows, filename=filename)

"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the earnings rules live in the services.
"""

from datetime import date

from src.workday_tracker.workday_tracker.common.formatting import format_currency
from src.workday_tracker.workday_tracker.container import build_container
from src.workday_tracker.workday_tracker.storage.memory_store import MemoryKeyValueStore


def main():
    container = build_container(store=MemoryKeyValueStore())
    client = container.client_service.create(name="Villa Anfa", location="Casablanca")
    employee = container.employee_service.create(name="Karim", daily_rate="200")

    days = container.work_day_service
    days.save_work_day(
        employee_id=employee.employee_id,
        work_date="2024-06-05",
        client_ids=[client.client_id],
        client_shifts={client.client_id: {"all_day": True}},
    )
    days.save_work_day(employee_id=employee.employee_id, work_date="2024-06-06", is_absence=True)
    days.save_work_day(
        employee_id=employee.employee_id,
        work_date="2024-06-07",
        client_ids=[client.client_id],
        client_hours={client.client_id: "5"},
    )

    stats = container.earnings_report_service.compute_monthly_stats(employee, 2024, 6)
    print(stats.work_days, stats.absence_days, format_currency(stats.total_earnings))

    current = container.earnings_report_service.compute_employee_stats(employee, reference_date=date(2024, 6, 20))
    print(current)


if __name__ == "__main__":
    main()

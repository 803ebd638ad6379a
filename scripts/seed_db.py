"""Seed demo employees, clients and two weeks of work days into the configured store."""

from __future__ import annotations

import importlib
from datetime import timedelta

from config import get_settings_module
from workday_tracker.common.datetime_utils import format_iso_date, now_local
from workday_tracker.container import build_container, build_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        backend=settings.STORAGE_BACKEND,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    c = build_container(store=store)

    villa = c.client_service.create(name="Villa Anfa", location="Casablanca")
    office = c.client_service.create(name="Bureau Agdal", location="Rabat")
    karim = c.employee_service.create(name="Karim", daily_rate="200")
    salma = c.employee_service.create(name="Salma", daily_rate="180")

    today = now_local().date()
    for offset in range(14):
        day = today - timedelta(days=offset)
        if day.weekday() == 6:
            continue
        work_date = format_iso_date(day)
        if offset % 5 == 4:
            c.work_day_service.save_work_day(employee_id=karim.employee_id, work_date=work_date, is_absence=True)
        else:
            c.work_day_service.save_work_day(
                employee_id=karim.employee_id,
                work_date=work_date,
                client_ids=[villa.client_id],
                client_shifts={villa.client_id: {"all_day": True}},
            )
        c.work_day_service.save_work_day(
            employee_id=salma.employee_id,
            work_date=work_date,
            client_ids=[villa.client_id, office.client_id],
            client_shifts={villa.client_id: {"morning": True}, office.client_id: {"evening": offset % 2 == 0}},
        )

    c.employee_service.add_advance(karim.employee_id, "300")
    print(f"OK: Seeded 2 clients, 2 employees into {settings.STORAGE_BACKEND} store")


if __name__ == "__main__":
    main()

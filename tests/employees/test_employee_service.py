from decimal import Decimal

import pytest

from src.workday_tracker.workday_tracker.core.exceptions import NotFoundError, ValidationError


def test_create_validates_name_and_rate(container):
    svc = container.employee_service

    with pytest.raises(ValidationError):
        svc.create(name="  ", daily_rate="100")
    with pytest.raises(ValidationError):
        svc.create(name="Karim", daily_rate="0")
    with pytest.raises(ValidationError):
        svc.create(name="Karim", daily_rate="nan")

    e = svc.create(name=" Karim ", daily_rate="120.5")
    assert e.name == "Karim"
    assert e.daily_rate == Decimal("120.5")
    assert e.advances == 0


def test_advances_only_grow(container):
    svc = container.employee_service
    e = svc.create(name="Karim", daily_rate="100")

    svc.add_advance(e.employee_id, "50")
    svc.add_advance(e.employee_id, Decimal("25.25"))

    assert svc.get(e.employee_id).advances == Decimal("75.25")
    with pytest.raises(ValidationError):
        svc.add_advance(e.employee_id, "-10")


def test_update_and_delete(container):
    svc = container.employee_service
    e = svc.create(name="Karim", daily_rate="100")

    updated = svc.update(e.employee_id, daily_rate="150")
    assert updated.name == "Karim"
    assert svc.get(e.employee_id).daily_rate == Decimal("150")

    svc.delete(e.employee_id)
    with pytest.raises(NotFoundError):
        svc.get(e.employee_id)


def test_delete_keeps_work_records(container):
    e = container.employee_service.create(name="Karim", daily_rate="100")
    container.work_day_service.save_work_day(employee_id=e.employee_id, work_date="2024-06-05", is_absence=True)

    container.employee_service.delete(e.employee_id)

    assert len(container.work_records_repo.get_by_employee(e.employee_id)) == 1


def test_clients_crud(container):
    svc = container.client_service
    c = svc.create(name="Villa", location=" Casablanca ")

    assert svc.get(c.client_id).location == "Casablanca"
    assert svc.update(c.client_id, name="Villa Anfa").name == "Villa Anfa"

    svc.delete(c.client_id)
    with pytest.raises(NotFoundError):
        svc.delete(c.client_id)

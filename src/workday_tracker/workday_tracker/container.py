from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .clients.kv_client_repository import KVClientRepository
from .clients.service import ClientService
from .database.connection import DBConfig, DatabaseConnection
from .employees.kv_employee_repository import KVEmployeeRepository
from .employees.service import EmployeeService
from .payroll.service import EarningsReportService
from .settings.kv_settings_repository import KVSettingsRepository
from .settings.service import SettingsService
from .storage.base import KeyValueStore
from .storage.json_store import JsonFileKeyValueStore
from .storage.memory_store import MemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .workrecords.kv_work_record_repository import KVWorkRecordRepository
from .workrecords.service import WorkDayService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    employees_repo: KVEmployeeRepository
    clients_repo: KVClientRepository
    work_records_repo: KVWorkRecordRepository
    settings_repo: KVSettingsRepository

    employee_service: EmployeeService
    client_service: ClientService
    work_day_service: WorkDayService
    earnings_report_service: EarningsReportService
    settings_service: SettingsService


def build_store(*, backend: str, storage_path: Optional[str] = None, db_config: Optional[dict] = None) -> KeyValueStore:
    backend = (backend or "json").lower()
    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "json":
        if not storage_path:
            raise ValueError("STORAGE_PATH is required for the json backend")
        return JsonFileKeyValueStore(storage_path)
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql backend")
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(*, store: KeyValueStore) -> Container:
    employees_repo = KVEmployeeRepository(store)
    clients_repo = KVClientRepository(store)
    work_records_repo = KVWorkRecordRepository(store)
    settings_repo = KVSettingsRepository(store)

    employee_service = EmployeeService(employees_repo)
    client_service = ClientService(clients_repo)
    work_day_service = WorkDayService(work_records_repo, employee_service, clients_repo)
    earnings_report_service = EarningsReportService(work_records_repo, employees_repo)
    settings_service = SettingsService(settings_repo)

    logger.debug("[container] built on %s", type(store).__name__)

    return Container(
        store=store,
        employees_repo=employees_repo,
        clients_repo=clients_repo,
        work_records_repo=work_records_repo,
        settings_repo=settings_repo,
        employee_service=employee_service,
        client_service=client_service,
        work_day_service=work_day_service,
        earnings_report_service=earnings_report_service,
        settings_service=settings_service,
    )

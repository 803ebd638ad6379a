from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .core.exceptions import NotFoundError, StorageError, ValidationError
from .container import Container, build_container, build_store
from .database.bootstrap import apply_schema
from .clients.controller import register as register_clients
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .settings.controller import register as register_settings
from .workrecords.controller import register as register_workrecords

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.errorhandler(StorageError)
    def _storage(e: StorageError):
        # Stats are unavailable, not zero: never answer with placeholder figures.
        logger.error("[workday-tracker] storage failure: %s", e)
        return jsonify({"success": False, "message": "Storage unavailable"}), 503


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CURRENCY"] = getattr(settings, "CURRENCY", "MAD")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", "json")
        db_config = getattr(settings, "DB_CONFIG", None)
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
        store = build_store(backend=backend, storage_path=getattr(settings, "STORAGE_PATH", None), db_config=db_config)
        container = build_container(store=store)
        logger.info("[workday-tracker] settings=%s storage=%s", settings_module, backend)

    app.extensions["workday_tracker"] = container

    register_employees(app, container)
    register_clients(app, container)
    register_workrecords(app, container)
    register_payroll(app, container)
    register_settings(app, container)
    register_error_handlers(app)

    return app

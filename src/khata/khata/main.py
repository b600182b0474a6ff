from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.web import register_error_handlers
from .container import build_container
from .core.constants import DEFAULT_LOCKOUT_MINUTES, DEFAULT_MAX_LOGIN_ATTEMPTS, MAX_PHOTO_BYTES
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema, list_tables

from .advances.controller import register as register_advances
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .payments.controller import register as register_payments
from .reports.controller import register as register_reports
from .users.controller import register as register_users
from .vehicles.controller import register as register_vehicles

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    backend = StorageBackend(getattr(settings, "STORAGE_BACKEND", StorageBackend.MYSQL.value))
    db_config = getattr(settings, "DB_CONFIG", None)
    app.logger.info("settings=%s backend=%s", settings_module, backend.value)
    if backend == StorageBackend.MYSQL:
        app.logger.info(
            "db=%s@%s:%s/%s",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    container = build_container(
        backend=backend,
        db_config=db_config,
        admin_email=getattr(settings, "ADMIN_BOOTSTRAP_EMAIL", None),
        max_login_attempts=int(getattr(settings, "MAX_LOGIN_ATTEMPTS", DEFAULT_MAX_LOGIN_ATTEMPTS)),
        lockout_minutes=int(getattr(settings, "LOGIN_LOCKOUT_MINUTES", DEFAULT_LOCKOUT_MINUTES)),
        max_photo_bytes=int(getattr(settings, "MAX_PHOTO_BYTES", MAX_PHOTO_BYTES)),
        edit_window=getattr(settings, "ATTENDANCE_EDIT_WINDOW", "today"),
        half_day_policy=getattr(settings, "HALF_DAY_POLICY", "full"),
    )

    if backend == StorageBackend.MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        app.logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["khata"] = container
    register_error_handlers(app)

    register_users(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_advances(app, container)
    register_payments(app, container)
    register_vehicles(app, container)
    register_reports(app, container)

    return app

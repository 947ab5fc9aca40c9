from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask.logging import default_handler

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_CURRENCY
from .database.bootstrap import apply_schema, list_tables
from .payroll.controller import register as register_payroll
from .workers.controller import register as register_workers

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(level: str) -> None:
    """Route the service loggers ('payroll_system.*') through Flask's handler."""
    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(level)
    if default_handler not in package_logger.handlers:
        package_logger.addHandler(default_handler)


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    When ``container`` is given (tests, embedding) the database settings are
    not touched and no schema bootstrap runs.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CURRENCY"] = getattr(settings, "CURRENCY", DEFAULT_CURRENCY)
    configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")).upper())

    if container is None:
        db_config = dict(getattr(settings, "DB_CONFIG"))
        if app.config["DEBUG"]:
            app.logger.info(
                "[payroll-system] settings=%s db=%s@%s:%s/%s",
                settings_module,
                db_config.get("user"),
                db_config.get("host"),
                db_config.get("port", 3306),
                db_config.get("database"),
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            if app.config["DEBUG"]:
                app.logger.info("[payroll-system] schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config)

    register_workers(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app

from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema
from .core.exceptions import DomainError
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .shifts.controller import register as register_shifts

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MANUAL_ENTRY_AUTHOR"] = getattr(settings, "MANUAL_ENTRY_AUTHOR", "admin")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(db_config=db_config)
        if bool(getattr(settings, "AUTO_INIT_DB", False)) and container.conn is not None:
            apply_schema(container.conn)

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        return jsonify({"success": False, "message": str(exc)}), 400

    register_employees(app, container)
    register_shifts(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def load_settings(settings_module: str, overrides: Optional[dict[str, Any]] = None) -> SimpleNamespace:
    """Upper-case names of the settings module, with optional overrides applied."""
    module = importlib.import_module(settings_module)
    values = {k: getattr(module, k) for k in dir(module) if k.isupper()}
    values.update(overrides or {})
    return SimpleNamespace(**values)


def create_app(settings_module: Optional[str] = None, *, overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = load_settings(settings_module, overrides)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    db_config = getattr(settings, "DB_CONFIG")
    data_source = getattr(settings, "DATA_SOURCE", "mock")
    logger.info(
        "settings=%s data_source=%s registry=%s db=%s@%s:%s/%s",
        settings_module,
        data_source,
        getattr(settings, "EMPLOYEE_REGISTRY", "json"),
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(settings)
    app.extensions["attendance_container"] = container

    register_employees(app, container)
    register_attendance(app, container)

    return app

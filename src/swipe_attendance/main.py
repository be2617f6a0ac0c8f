from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logger import configure_level, get_logger
from .container import Container, build_container
from .core.constants import DEFAULT_REPORT_DAYS
from .database.bootstrap import apply_schema, list_tables

logger = get_logger(__name__)


def create_app(*, container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["REPORT_DEFAULT_DAYS"] = int(getattr(settings, "REPORT_DEFAULT_DAYS", DEFAULT_REPORT_DAYS))
    configure_level(getattr(settings, "LOG_LEVEL", "INFO"))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[2] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    register_attendance(app, container)

    return app

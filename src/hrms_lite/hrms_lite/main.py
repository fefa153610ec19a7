from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.responses import fail, ok
from .container import Container, build_container
from .core.constants import DEFAULT_API_PREFIX, DEFAULT_POOL_SIZE
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Without a ``container`` the MySQL-backed one is built from settings and the
    database is pinged; an unreachable database raises StoreError and aborts
    startup.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False
    prefix = str(getattr(settings, "API_PREFIX", DEFAULT_API_PREFIX)).rstrip("/")

    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    CORS(app, resources={rf"{prefix}/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}})

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_POOL_SIZE)),
        )
        container.conn.ping()
        atexit.register(container.close)

    app.extensions["hrms_container"] = container

    register_employees(app, container, prefix=prefix)
    register_attendance(app, container, prefix=prefix)

    @app.route(f"{prefix}/health", methods=["GET"], endpoint="health")
    def health():
        return ok(message="Server is running")

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    return app

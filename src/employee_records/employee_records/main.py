from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admins.controller import register as register_admin_auth
from .auth.controller import register as register_employee_auth
from .common.responses import register_error_handlers
from .container import STORE_MYSQL, Container, build_container
from .core.logger import configure_logging
from .database.bootstrap import apply_schema, ensure_default_admin, list_tables
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_PREFIX"] = getattr(settings, "API_PREFIX", "")
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    store_backend = getattr(settings, "STORE_BACKEND", STORE_MYSQL)
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.info(
        "settings=%s store=%s db=%s@%s:%s/%s",
        settings_module,
        store_backend,
        (db_config or {}).get("user"),
        (db_config or {}).get("host"),
        (db_config or {}).get("port", 3306),
        (db_config or {}).get("database"),
    )

    if container is None:
        if store_backend == STORE_MYSQL and getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(
            jwt_secret=getattr(settings, "JWT_SECRET"),
            db_config=db_config,
            store_backend=store_backend,
            password_method=getattr(settings, "PASSWORD_HASH_METHOD", None),
        )
        if getattr(settings, "AUTO_CREATE_ADMIN", False):
            ensure_default_admin(container, getattr(settings, "DEFAULT_ADMIN"))

    app.extensions["container"] = container

    register_error_handlers(app)
    register_admin_auth(app, container)
    register_employee_auth(app, container)
    register_employees(app, container)

    return app

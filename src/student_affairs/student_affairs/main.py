from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.log import configure_logging, get_logger
from .container import build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_accounts, list_tables, seed_memory_store
from .database.store import RecordStore
from .identity.controller import register as register_identity

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(settings_module: Optional[str] = None, *, store: Optional[RecordStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log_dir = getattr(settings, "LOG_DIR", None)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), Path(log_dir) if log_dir else None)
    logger = get_logger(__name__)

    backend = str(getattr(settings, "STORE_BACKEND", "mysql")).lower()
    db_config = getattr(settings, "DB_CONFIG", {})
    logger.info(
        "settings=%s store=%s db=%s@%s:%s/%s",
        settings_module,
        backend,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    auto_init_db = bool(getattr(settings, "AUTO_INIT_DB", False))
    auto_seed_db = bool(getattr(settings, "AUTO_SEED_DB", False))
    if store is None and backend == "mysql":
        if auto_init_db:
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if auto_seed_db:
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_accounts(db_config)
            logger.info("demo seed ready")

    container = build_container(settings=settings, store=store)
    if auto_seed_db and backend == "memory":
        seed_memory_store(container.store)
        logger.info("demo seed ready (memory)")

    app.extensions["student_affairs"] = container
    register_identity(app, container)

    return app

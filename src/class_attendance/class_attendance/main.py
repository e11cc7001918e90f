from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root_logger.addHandler(handler)


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    container = build_container(
        db_config=db_config,
        default_tolerance=getattr(settings, "DEFAULT_TOLERANCE_MINUTES", 10),
        default_strategy=getattr(settings, "DEFAULT_STRATEGY_KIND", "STANDARD_LATE_WINDOW"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%s)", len(list_tables(container.conn)))

    return container

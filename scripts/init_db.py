"""Create the ``attendance`` table in the database named by the active settings.

    APP_ENV=production python scripts/init_db.py
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SCHEMA_PATH = REPO_ROOT / "database" / "schema.sql"

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.youthsync.youthsync.database.bootstrap import apply_schema, list_tables
from src.youthsync.youthsync.main import configure_logging, logger


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = dict(settings.DB_CONFIG)
    apply_schema(db_config, schema_path=SCHEMA_PATH)

    tables = list_tables(db_config)
    if "attendance" not in tables:
        logger.error("schema applied but no attendance table in %s", db_config.get("database"))
        sys.exit(1)
    logger.info("attendance table ready in %s (tables=%s)", db_config.get("database"), ", ".join(tables))


if __name__ == "__main__":
    main()

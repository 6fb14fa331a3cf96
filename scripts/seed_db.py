"""Insert a few demo attendance records through the service layer."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.youthsync.youthsync.container import build_container
from src.youthsync.youthsync.main import configure_logging, logger

DEMO_RECORDS = [
    {"student_id": 1, "date": "2024-01-10", "status": "Present"},
    {"student_id": 2, "date": "2024-01-10", "status": "Absent"},
    {"student_id": 1, "date": "2024-01-17", "status": "Present"},
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=dict(settings.DB_CONFIG))

    for payload in DEMO_RECORDS:
        container.attendance_service.record(payload)
    logger.info("seeded %d attendance records into %s", len(DEMO_RECORDS), container.conn.describe())


if __name__ == "__main__":
    main()

"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; recording and reporting live in the services.
"""

import importlib

from config import get_settings_module

from src.youthsync.youthsync.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.report_service.build_report("day").as_json())
    print(container.report_service.build_report("week").as_json())


if __name__ == "__main__":
    main()

from __future__ import annotations

import importlib

import pytest
from mysql.connector import pooling

from src.youthsync.youthsync import main


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows

    def execute(self, sql, params=None):
        pass

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows):
        self._rows = rows

    def cursor(self, dictionary=False):
        return FakeCursor(self._rows)

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakePool:
    rows: list[dict] = []
    sizes: list[int] = []

    def __init__(self, *, pool_name, pool_size, **kwargs):
        FakePool.sizes.append(pool_size)

    def get_connection(self):
        return FakeConnection(FakePool.rows)


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    FakePool.rows = [
        {"student_id": 1, "date": "2024-01-10", "status": "Present"},
        {"student_id": 2, "date": "2024-01-10", "status": "Absent"},
        {"student_id": 1, "date": "2024-01-17", "status": "Present"},
    ]
    FakePool.sizes = []
    monkeypatch.setattr(pooling, "MySQLConnectionPool", FakePool)
    return importlib.import_module("config.testing")


def test_default_wiring_uses_configured_report_period(settings, monkeypatch):
    monkeypatch.setattr(settings, "REPORT_PERIOD", "week")
    monkeypatch.setattr(settings, "DB_POOL_SIZE", 3)

    client = main.create_app().test_client()
    resp = client.get("/report")

    assert resp.status_code == 200
    assert resp.get_json() == [
        {"week": "2024-W02", "present_count": 1, "absent_count": 1},
        {"week": "2024-W03", "present_count": 1, "absent_count": 0},
    ]
    assert client.get("/report?period=day").get_json()[0]["date"] == "01-10-2024"
    assert FakePool.sizes == [3]


def test_auto_init_db_applies_shipped_schema(settings, monkeypatch):
    applied = []
    monkeypatch.setattr(settings, "AUTO_INIT_DB", True)
    monkeypatch.setattr(main, "apply_schema", lambda db_config, *, schema_path: applied.append((db_config, schema_path)))
    monkeypatch.setattr(main, "list_tables", lambda db_config: ["attendance"])

    main.create_app()

    assert len(applied) == 1
    db_config, schema_path = applied[0]
    assert db_config == settings.DB_CONFIG
    assert schema_path.name == "schema.sql"
    assert schema_path.is_file()


def test_schema_untouched_without_auto_init(settings, monkeypatch):
    monkeypatch.setattr(main, "apply_schema", lambda *a, **kw: pytest.fail("schema applied"))

    main.create_app()


def test_configure_logging_installs_one_handler():
    main.configure_logging("INFO")
    main.configure_logging("DEBUG")

    assert main.logger.handlers.count(main._handler) == 1
    assert main.logger.level == 10


def test_container_keeps_the_pooled_handle_it_built():
    from src.youthsync.youthsync.container import build_container, wire

    container = build_container(
        db_config={"host": "db", "port": 3306, "user": "app", "password": "", "database": "youthsync"},
        pool_size=2,
    )

    assert container.conn.describe() == "app@db:3306/youthsync (pool=2)"
    assert wire(object()).conn is None


def test_entry_point_defaults_to_localhost_8080(settings):
    entry = importlib.import_module("app")

    assert (entry.DEFAULT_HOST, entry.DEFAULT_PORT) == ("127.0.0.1", 8080)
    assert {"/", "/attendance", "/report", "/export"} <= {r.rule for r in entry.app.url_map.iter_rules()}

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import errors, pooling

from ..core.constants import DEFAULT_POOL_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE

    @classmethod
    def from_dict(cls, db_config: dict, *, pool_size: int = DEFAULT_POOL_SIZE) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "youthsync")),
            pool_size=int(pool_size),
        )

    def connect_kwargs(self) -> dict:
        return dict(
            host=self.host,
            port=int(self.port),
            user=self.user,
            password=self.password,
            database=self.database,
        )


class DatabaseConnection:
    """Pooled DB connection handle.

    One instance is built per app and passed to repositories through the
    container. The pool is opened on first use so the app can start before
    MySQL is reachable. Connections returned by ``connect()`` go back to the
    pool on ``close()``.

    When every pooled connection is busy, ``connect()`` opens a short-lived
    connection instead of failing the request; it is really closed on
    ``close()``.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._pool_lock = threading.Lock()

    def describe(self) -> str:
        c = self._config
        return f"{c.user}@{c.host}:{c.port}/{c.database} (pool={c.pool_size})"

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._pool_lock:
            if self._pool is None:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name="youthsync",
                    pool_size=self._config.pool_size,
                    **self._config.connect_kwargs(),
                )
            return self._pool

    def connect(self):
        pool = self._get_pool()
        try:
            return pool.get_connection()
        except errors.PoolError:
            logger.debug("pool exhausted; opening a short-lived connection")
            return mysql.connector.connect(**self._config.connect_kwargs())

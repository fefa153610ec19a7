from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling

from ..core.constants import DEFAULT_POOL_SIZE
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "hrms_lite")),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Pooled DB connection factory.

    Constructed once at startup and passed to repositories; ``close()`` releases
    the pool on shutdown. The pool itself is created on first use.
    """

    def __init__(self, config: DBConfig, *, pool_size: int = DEFAULT_POOL_SIZE, pool_name: str = "hrms_lite"):
        self._config = config
        self._pool_size = int(pool_size)
        self._pool_name = pool_name
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        if self._pool is None:
            try:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=self._pool_name,
                    pool_size=self._pool_size,
                    pool_reset_session=True,
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                )
            except mysql.connector.Error as exc:
                raise StoreError(f"Cannot connect to database {self._config.describe()}: {exc}") from exc
            logger.info("Connection pool ready (%s, size=%d)", self._config.describe(), self._pool_size)
        return self._pool

    def connect(self):
        """Borrow a connection; calling ``close()`` on it returns it to the pool."""
        pool = self._get_pool()
        try:
            return pool.get_connection()
        except mysql.connector.Error as exc:
            raise StoreError(f"Cannot obtain database connection: {exc}") from exc

    def ping(self) -> None:
        conn = self.connect()
        try:
            conn.ping(reconnect=False)
        except mysql.connector.Error as exc:
            raise StoreError(f"Database is not reachable: {exc}") from exc
        finally:
            conn.close()

    def close(self) -> None:
        if self._pool is None:
            return
        pool, self._pool = self._pool, None
        # Closes the idle connections queued in the pool.
        closed = pool._remove_connections()
        logger.info("Connection pool released (%s, closed=%s)", self._config.describe(), closed)

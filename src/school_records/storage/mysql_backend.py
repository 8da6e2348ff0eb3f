from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import mysql.connector

from ..app_logger import get_logger
from ..core.exceptions import PersistenceError
from .backend import LockedValue, LockingBackend
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone

logger = get_logger(__name__)

KV_TABLE = "kv_store"

_UPSERT_SQL = f"""
INSERT INTO {KV_TABLE}(store_key, store_value)
VALUES(%s,%s)
ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
"""


class MySQLKeyValueBackend(LockingBackend):
    """Stores each collection blob as one row of the ``kv_store`` table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"SELECT store_value FROM {KV_TABLE} WHERE store_key=%s", (key,))
                r = fetchone(cur)
                return r["store_value"] if r else None
        except mysql.connector.Error as exc:
            logger.error("Read of %r failed: %s", key, exc)
            raise PersistenceError(f"No se pudo leer {key!r}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(_UPSERT_SQL, (key, value))
        except mysql.connector.Error as exc:
            logger.error("Write of %r failed: %s", key, exc)
            raise PersistenceError(f"No se pudo guardar {key!r}") from exc

    def remove(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"DELETE FROM {KV_TABLE} WHERE store_key=%s", (key,))
        except mysql.connector.Error as exc:
            logger.error("Delete of %r failed: %s", key, exc)
            raise PersistenceError(f"No se pudo eliminar {key!r}") from exc

    @contextmanager
    def locked(self, key: str) -> Iterator[LockedValue]:
        """Hold a server-side named lock on ``key`` for one read-modify-write.

        Every worker process talks to the same server, so GET_LOCK serializes
        their mutations of a collection. The lock also covers keys that have
        no row yet, which ``SELECT ... FOR UPDATE`` would not.
        """
        lock_name = f"{KV_TABLE}:{key}"
        try:
            with db_cursor(self._conn_factory) as (conn, cur):
                # negative timeout: wait until the lock is free
                cur.execute("SELECT GET_LOCK(%s, -1) AS acquired", (lock_name,))
                r = fetchone(cur)
                if not r or r["acquired"] != 1:
                    raise PersistenceError(f"No se pudo bloquear {key!r}")
                try:
                    cur.execute(f"SELECT store_value FROM {KV_TABLE} WHERE store_key=%s", (key,))
                    r = fetchone(cur)
                    current = LockedValue(r["store_value"] if r else None)

                    yield current

                    if current.dirty:
                        cur.execute(_UPSERT_SQL, (key, current.value))
                        # visible to the next holder before the lock is released
                        conn.commit()
                finally:
                    cur.execute("SELECT RELEASE_LOCK(%s) AS released", (lock_name,))
                    cur.fetchone()
        except mysql.connector.Error as exc:
            logger.error("Locked update of %r failed: %s", key, exc)
            raise PersistenceError(f"No se pudo actualizar {key!r}") from exc

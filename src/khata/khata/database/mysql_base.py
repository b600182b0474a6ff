from __future__ import annotations

import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

import mysql.connector

from ..core.exceptions import StoreError
from ..store.subscriptions import Listener, SubscriptionHub, Unsubscribe
from .connection import DatabaseConnection

T = TypeVar("T")

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Cannot connect to MySQL: %s", e)
        raise StoreError("Database is unavailable") from e
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("MySQL statement failed: %s", e)
        raise StoreError("Database operation failed") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_decimal(value: Any) -> Optional[Decimal]:
    """DECIMAL columns come back as Decimal, but tolerate str/float from drivers."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class MySQLRepository(Generic[T]):
    """Shared plumbing for MySQL repositories: connection factory + live snapshots."""

    collection: str = ""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._hub: SubscriptionHub[T] = SubscriptionHub(self.collection)

    def list_all(self) -> Sequence[T]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._hub.subscribe(listener, initial=self.list_all())

    def _publish(self) -> None:
        if self._hub.listener_count:
            self._hub.publish(self.list_all())

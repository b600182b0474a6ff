"""Session-only storage used when no database is configured (and by tests)."""
from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from ..common.datetime_utils import now_local
from .subscriptions import Listener, SubscriptionHub, Unsubscribe

T = TypeVar("T")


class InMemoryCollection(Generic[T]):
    """Dict-backed collection of frozen dataclass records.

    ``id_field`` names the dataclass attribute holding the record id; ids are
    generated as increasing decimal strings.
    """

    def __init__(self, name: str, *, id_field: str, clock: Callable[[], datetime] = now_local):
        self.name = name
        self._id_field = id_field
        self._clock = clock
        self._items: dict[str, T] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()
        self._hub: SubscriptionHub[T] = SubscriptionHub(name)

    def next_id(self) -> str:
        return str(next(self._ids))

    def now(self) -> datetime:
        return self._clock()

    def list_all(self) -> Sequence[T]:
        with self._lock:
            items = list(self._items.values())
        # Newest first, same as the MySQL ORDER BY created_at DESC.
        items.reverse()
        return items

    def get_by_id(self, record_id: str) -> Optional[T]:
        with self._lock:
            return self._items.get(str(record_id))

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        with self._lock:
            return next((r for r in self._items.values() if predicate(r)), None)

    def insert(self, record: T) -> str:
        record_id = str(getattr(record, self._id_field))
        with self._lock:
            self._items[record_id] = record
        self._publish()
        return record_id

    def upsert(self, predicate: Callable[[T], bool], build: Callable[[Optional[T]], T]) -> str:
        """Replace the first record matching ``predicate`` or insert a new one.

        ``build`` receives the existing record (or None) and returns the record
        to store; lookup and write happen under one lock.
        """
        with self._lock:
            current = next((r for r in self._items.values() if predicate(r)), None)
            record = build(current)
            record_id = str(getattr(record, self._id_field))
            self._items[record_id] = record
        self._publish()
        return record_id

    def update(self, record_id: str, **changes: Any) -> bool:
        with self._lock:
            current = self._items.get(str(record_id))
            if current is None:
                return False
            self._items[str(record_id)] = replace(current, **changes)
        self._publish()
        return True

    def delete(self, record_id: str) -> bool:
        with self._lock:
            removed = self._items.pop(str(record_id), None)
        if removed is None:
            return False
        self._publish()
        return True

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._hub.subscribe(listener, initial=self.list_all())

    def _publish(self) -> None:
        self._hub.publish(self.list_all())

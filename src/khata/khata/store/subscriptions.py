from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Sequence, TypeVar

T = TypeVar("T")

Listener = Callable[[Sequence[T]], None]
Unsubscribe = Callable[[], None]

logger = logging.getLogger(__name__)


class SubscriptionHub(Generic[T]):
    """Fan-out of full collection snapshots to live listeners.

    Repositories call ``publish`` after every successful write. A failing
    listener is logged and skipped so the write itself still succeeds.
    """

    def __init__(self, collection: str):
        self._collection = collection
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: Listener, *, initial: Sequence[T] | None = None) -> Unsubscribe:
        with self._lock:
            self._listeners.append(listener)

        if initial is not None:
            self._deliver(listener, initial)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def publish(self, snapshot: Sequence[T]) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            self._deliver(listener, snapshot)

    def _deliver(self, listener: Listener, snapshot: Sequence[T]) -> None:
        try:
            listener(snapshot)
        except Exception:
            logger.exception("Listener for %s failed", self._collection)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

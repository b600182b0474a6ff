from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..store.memory import InMemoryCollection
from ..store.subscriptions import Listener, Unsubscribe
from .model import Advance
from .repository import AdvanceRepository


class InMemoryAdvanceRepository(AdvanceRepository):
    def __init__(self, collection: InMemoryCollection[Advance] | None = None):
        self._items = collection or InMemoryCollection("advances", id_field="advance_id")

    def list_all(self) -> Sequence[Advance]:
        return self._items.list_all()

    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        return self._items.get_by_id(advance_id)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._items.subscribe(listener)

    def create(
        self,
        *,
        employee_id: str,
        employee_name: str,
        amount: Decimal,
        advance_date: date,
        description: str,
    ) -> str:
        return self._items.insert(
            Advance(
                advance_id=self._items.next_id(),
                employee_id=str(employee_id),
                employee_name=employee_name,
                amount=amount,
                advance_date=advance_date,
                description=description,
                created_at=self._items.now(),
            )
        )

    def delete_by_id(self, advance_id: str) -> bool:
        return self._items.delete(advance_id)

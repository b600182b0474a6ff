from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..store.subscriptions import Listener, Unsubscribe
from .model import Advance


class AdvanceRepository(Protocol):
    def list_all(self) -> Sequence[Advance]:
        raise NotImplementedError

    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        employee_name: str,
        amount: Decimal,
        advance_date: date,
        description: str,
    ) -> str:
        raise NotImplementedError

    def delete_by_id(self, advance_id: str) -> bool:
        raise NotImplementedError

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..store.subscriptions import Listener, Unsubscribe
from .model import SalaryPayment


class SalaryPaymentRepository(Protocol):
    """Append-only: there is deliberately no update or delete."""

    def list_all(self) -> Sequence[SalaryPayment]:
        raise NotImplementedError

    def get_by_id(self, payment_id: str) -> Optional[SalaryPayment]:
        raise NotImplementedError

    def get_reversal_of(self, payment_id: str) -> Optional[SalaryPayment]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        payment_date: date,
        description: str,
        reverses_payment_id: Optional[str] = None,
    ) -> str:
        raise NotImplementedError

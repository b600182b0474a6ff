from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..store.memory import InMemoryCollection
from ..store.subscriptions import Listener, Unsubscribe
from .model import SalaryPayment
from .repository import SalaryPaymentRepository


class InMemorySalaryPaymentRepository(SalaryPaymentRepository):
    def __init__(self, collection: InMemoryCollection[SalaryPayment] | None = None):
        self._items = collection or InMemoryCollection("salaryPayments", id_field="payment_id")

    def list_all(self) -> Sequence[SalaryPayment]:
        return self._items.list_all()

    def get_by_id(self, payment_id: str) -> Optional[SalaryPayment]:
        return self._items.get_by_id(payment_id)

    def get_reversal_of(self, payment_id: str) -> Optional[SalaryPayment]:
        return self._items.find(lambda p: p.reverses_payment_id == str(payment_id))

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._items.subscribe(listener)

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        payment_date: date,
        description: str,
        reverses_payment_id: Optional[str] = None,
    ) -> str:
        return self._items.insert(
            SalaryPayment(
                payment_id=self._items.next_id(),
                employee_id=str(employee_id),
                amount=amount,
                payment_date=payment_date,
                description=description,
                created_at=self._items.now(),
                reverses_payment_id=reverses_payment_id,
            )
        )

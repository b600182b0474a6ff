from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..store.memory import InMemoryCollection
from ..store.subscriptions import Listener, Unsubscribe
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, collection: InMemoryCollection[Employee] | None = None):
        self._items = collection or InMemoryCollection("employees", id_field="employee_id")

    def list_all(self) -> Sequence[Employee]:
        return self._items.list_all()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._items.get_by_id(employee_id)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._items.subscribe(listener)

    def create(
        self,
        *,
        name: str,
        designation: str,
        contact_number: str,
        daily_wage: Decimal,
        photo: Optional[str] = None,
    ) -> str:
        return self._items.insert(
            Employee(
                employee_id=self._items.next_id(),
                name=name,
                designation=designation,
                contact_number=contact_number,
                daily_wage=daily_wage,
                created_at=self._items.now(),
                photo=photo,
            )
        )

    def delete_by_id(self, employee_id: str) -> bool:
        return self._items.delete(employee_id)

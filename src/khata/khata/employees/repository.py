from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..store.subscriptions import Listener, Unsubscribe
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        designation: str,
        contact_number: str,
        daily_wage: Decimal,
        photo: Optional[str] = None,
    ) -> str:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError

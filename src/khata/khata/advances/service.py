from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Sequence

from ..common.money import money_sum
from ..common.validators import require_positive_amount
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Advance
from .repository import AdvanceRepository

logger = logging.getLogger(__name__)


class AdvanceService:
    def __init__(self, advances: AdvanceRepository, employees: EmployeeRepository):
        self._advances = advances
        self._employees = employees

    def create(self, *, employee_id: str, amount: Any, advance_date: date, description: str = "") -> str:
        value = require_positive_amount(amount, "Amount")
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        advance_id = self._advances.create(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            amount=value,
            advance_date=advance_date,
            description=(description or "").strip(),
        )
        logger.info("Advance %s of %s for employee %s", advance_id, value, employee.employee_id)
        return advance_id

    def delete(self, advance_id: str) -> None:
        if not self._advances.delete_by_id(advance_id):
            raise NotFoundError("Advance not found")
        logger.info("Deleted advance %s", advance_id)

    def list_all(self) -> Sequence[Advance]:
        return self._advances.list_all()

    def total(self) -> Decimal:
        return money_sum(a.amount for a in self._advances.list_all())

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.validators import require_positive_amount
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import SalaryPayment
from .repository import SalaryPaymentRepository

logger = logging.getLogger(__name__)


class PaymentService:
    """Use case: record salary disbursements and their corrections."""

    def __init__(self, payments: SalaryPaymentRepository, employees: EmployeeRepository):
        self._payments = payments
        self._employees = employees

    def record(self, *, employee_id: str, amount: Any, payment_date: date, description: str = "") -> str:
        value = require_positive_amount(amount, "Amount")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        payment_id = self._payments.create(
            employee_id=str(employee_id),
            amount=value,
            payment_date=payment_date,
            description=(description or "").strip(),
        )
        logger.info("Salary payment %s of %s for employee %s", payment_id, value, employee_id)
        return payment_id

    def reverse(self, *, payment_id: str, reason: str = "", payment_date: Optional[date] = None) -> str:
        """Cancel a payment by appending its negation.

        The compensating entry keeps the original's date unless another is
        given, so the correction lands in the same payroll window.
        """
        original = self._payments.get_by_id(payment_id)
        if not original:
            raise NotFoundError("Payment not found")
        if original.is_reversal:
            raise ValidationError("A correction entry cannot itself be reversed")
        if self._payments.get_reversal_of(payment_id):
            raise ValidationError("Payment has already been reversed")

        reversal_id = self._payments.create(
            employee_id=original.employee_id,
            amount=-original.amount,
            payment_date=payment_date or original.payment_date,
            description=(reason or "").strip() or f"Reversal of payment {original.payment_id}",
            reverses_payment_id=original.payment_id,
        )
        logger.info("Reversed salary payment %s with %s", payment_id, reversal_id)
        return reversal_id

    def list_all(self) -> Sequence[SalaryPayment]:
        return self._payments.list_all()

    def list_for_employee(self, employee_id: str) -> list[SalaryPayment]:
        return [p for p in self._payments.list_all() if p.employee_id == str(employee_id)]

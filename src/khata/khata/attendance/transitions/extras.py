from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...common.money import to_money
from ...core.enums import DayStatus
from ...core.exceptions import ValidationError
from ...employees.model import Employee
from ..model import AttendanceRecord, DayMark
from .base import AttendanceTransition


class HalfDayTransition(AttendanceTransition):
    """Half day, optionally with a caller-supplied amount.

    How much base wage a half day earns is decided by the payroll
    calculator's HalfDayPolicy, not here.
    """

    def apply(
        self,
        *,
        current: Optional[AttendanceRecord],
        employee: Employee,
        hours: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
    ) -> DayMark:
        if amount is not None and amount < 0:
            raise ValidationError("Half-day amount cannot be negative")
        return DayMark(
            status=DayStatus.HALF_DAY,
            custom_amount=to_money(amount) if amount else None,
        )


class CustomTransition(AttendanceTransition):
    """Present plus an ad-hoc payment."""

    def apply(
        self,
        *,
        current: Optional[AttendanceRecord],
        employee: Employee,
        hours: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
    ) -> DayMark:
        if amount is None or amount <= 0:
            raise ValidationError("Custom amount must be greater than zero")
        return DayMark(status=DayStatus.CUSTOM, custom_amount=to_money(amount))

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...common.money import to_money
from ...core.constants import MAX_OVERTIME_HOURS, OVERTIME_MULTIPLIER, STANDARD_WORKDAY_HOURS
from ...core.enums import DayStatus
from ...core.exceptions import ValidationError
from ...employees.model import Employee
from ..model import AttendanceRecord, DayMark
from .base import AttendanceTransition


def overtime_rate(daily_wage: Decimal) -> Decimal:
    """Imputed hourly rate: the daily wage spread over an 8-hour day."""
    return daily_wage / STANDARD_WORKDAY_HOURS


def overtime_amount(daily_wage: Decimal, hours: Decimal) -> Decimal:
    return to_money(hours * overtime_rate(daily_wage) * OVERTIME_MULTIPLIER)


class OvertimeTransition(AttendanceTransition):
    """Present plus overtime paid at 1.5x the hourly rate."""

    def apply(
        self,
        *,
        current: Optional[AttendanceRecord],
        employee: Employee,
        hours: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
    ) -> DayMark:
        if hours is None:
            raise ValidationError("Overtime hours must be greater than zero")
        # stored as DECIMAL(6,2)
        hours = to_money(hours)
        if hours <= 0:
            raise ValidationError("Overtime hours must be greater than zero")
        if hours > MAX_OVERTIME_HOURS:
            raise ValidationError(f"Overtime hours cannot exceed {MAX_OVERTIME_HOURS}")

        wage = employee.daily_wage or Decimal("0")
        return DayMark(
            status=DayStatus.OVERTIME,
            custom_amount=overtime_amount(wage, hours),
            ot_hours=hours,
            ot_rate=to_money(overtime_rate(wage)),
        )

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...core.enums import DayStatus
from ...core.exceptions import ValidationError
from ...employees.model import Employee
from ..model import AttendanceRecord, DayMark
from .base import AttendanceTransition


class PresentTransition(AttendanceTransition):
    """Plain present day; clears late and any extra pay."""

    def apply(
        self,
        *,
        current: Optional[AttendanceRecord],
        employee: Employee,
        hours: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
    ) -> DayMark:
        return DayMark(status=DayStatus.PRESENT)


class AbsentTransition(AttendanceTransition):
    def apply(
        self,
        *,
        current: Optional[AttendanceRecord],
        employee: Employee,
        hours: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
    ) -> DayMark:
        return DayMark(status=DayStatus.ABSENT)


class LateTransition(AttendanceTransition):
    """Late arrival; only valid once the day has been marked."""

    def apply(
        self,
        *,
        current: Optional[AttendanceRecord],
        employee: Employee,
        hours: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
    ) -> DayMark:
        if current is None:
            raise ValidationError("Mark attendance before marking late")
        return DayMark(status=DayStatus.PRESENT_LATE)

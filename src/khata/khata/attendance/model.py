from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import week_start as week_start_of
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class DayMark:
    """The state written into an attendance cell by one action.

    ``custom_amount`` is the extra pay on top of the base wage; only present
    states may carry it. ``ot_hours``/``ot_rate`` are set for OVERTIME only.
    """

    status: DayStatus
    custom_amount: Optional[Decimal] = None
    ot_hours: Optional[Decimal] = None
    ot_rate: Optional[Decimal] = None

    def __post_init__(self):
        if self.status == DayStatus.NOT_MARKED:
            raise ValidationError("NOT_MARKED cannot be written")
        if not self.status.is_present and self.custom_amount is not None:
            raise ValidationError("An absent day cannot carry a custom amount")
        if self.custom_amount is not None and self.custom_amount < 0:
            raise ValidationError("Custom amount cannot be negative")
        if self.status != DayStatus.OVERTIME and (self.ot_hours is not None or self.ot_rate is not None):
            raise ValidationError("Overtime hours only apply to overtime days")


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance cell for (employee, date)."""

    attendance_id: str
    employee_id: str
    work_date: date
    week_start: date
    status: DayStatus
    created_at: datetime
    custom_amount: Optional[Decimal] = None
    ot_hours: Optional[Decimal] = None
    ot_rate: Optional[Decimal] = None
    note: Optional[str] = None

    def __post_init__(self):
        if self.week_start != week_start_of(self.work_date):
            raise ValidationError("week_start must be the Monday of work_date's week")

    @property
    def present(self) -> bool:
        return self.status.is_present

    @property
    def late(self) -> bool:
        return self.status == DayStatus.PRESENT_LATE

    @property
    def custom_type(self) -> Optional[str]:
        return self.status.custom_type

    @property
    def mark(self) -> DayMark:
        return DayMark(
            status=self.status,
            custom_amount=self.custom_amount,
            ot_hours=self.ot_hours,
            ot_rate=self.ot_rate,
        )

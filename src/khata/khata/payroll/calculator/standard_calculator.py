from __future__ import annotations

from decimal import Decimal

from ...attendance.model import AttendanceRecord
from ...common.money import ZERO
from ...core.enums import DayStatus, HalfDayPolicy
from .base import PayrollCalculator

_HALF = Decimal("0.5")


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: daily wage when present, plus custom amount when present.

    Absent days earn nothing, even if an old row still carries an amount.
    """

    def __init__(self, *, half_day_policy: HalfDayPolicy = HalfDayPolicy.FULL):
        self.half_day_policy = HalfDayPolicy(half_day_policy)

    def base_wage(self, record: AttendanceRecord, daily_wage: Decimal) -> Decimal:
        if not record.present:
            return ZERO
        wage = daily_wage or ZERO
        if record.status == DayStatus.HALF_DAY:
            if self.half_day_policy == HalfDayPolicy.HALF:
                return wage * _HALF
            if self.half_day_policy == HalfDayPolicy.NONE:
                return ZERO
        return wage

    def extra_pay(self, record: AttendanceRecord) -> Decimal:
        if not record.present or record.custom_amount is None:
            return ZERO
        return record.custom_amount

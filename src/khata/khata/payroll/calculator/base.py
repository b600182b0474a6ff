from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...attendance.model import AttendanceRecord


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Splits one attendance day into base wage and extra pay so reports can
    show both.
    """

    @abstractmethod
    def base_wage(self, record: AttendanceRecord, daily_wage: Decimal) -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def extra_pay(self, record: AttendanceRecord) -> Decimal:
        raise NotImplementedError

    def day_earnings(self, record: AttendanceRecord, daily_wage: Decimal) -> Decimal:
        return self.base_wage(record, daily_wage) + self.extra_pay(record)

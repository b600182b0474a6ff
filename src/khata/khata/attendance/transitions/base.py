from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from ...employees.model import Employee
from ..model import AttendanceRecord, DayMark


class AttendanceTransition(ABC):
    """Strategy Pattern: one class per attendance action.

    ``apply`` receives the cell's current record (None when not marked yet)
    and returns the mark that replaces it.
    """

    @abstractmethod
    def apply(
        self,
        *,
        current: Optional[AttendanceRecord],
        employee: Employee,
        hours: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
    ) -> DayMark:
        raise NotImplementedError

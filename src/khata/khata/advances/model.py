from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Advance:
    """Cash handed to an employee ahead of payroll; deducted from earned wages."""

    advance_id: str
    employee_id: str
    employee_name: str
    amount: Decimal
    advance_date: date
    description: str
    created_at: datetime

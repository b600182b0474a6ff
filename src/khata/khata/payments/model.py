from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SalaryPayment:
    """Cash disbursed against a computed balance.

    Rows are never edited. A correction is a new row with the negated amount
    whose ``reverses_payment_id`` points at the row it cancels.
    """

    payment_id: str
    employee_id: str
    amount: Decimal
    payment_date: date
    description: str
    created_at: datetime
    reverses_payment_id: Optional[str] = None

    @property
    def is_reversal(self) -> bool:
        return self.reverses_payment_id is not None

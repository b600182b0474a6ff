from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a daily-wage worker.

    Plain data object; attendance, advances and payments reference it by id.
    """

    employee_id: str
    name: str
    designation: str
    contact_number: str
    daily_wage: Decimal
    created_at: datetime
    photo: Optional[str] = None

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split() if part).upper()

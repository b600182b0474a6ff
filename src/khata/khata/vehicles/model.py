from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import VehicleType


@dataclass(frozen=True)
class Vehicle:
    vehicle_id: str
    vehicle_number: str
    vehicle_name: str
    vehicle_type: VehicleType
    created_at: datetime


@dataclass(frozen=True)
class FuelRecord:
    """One refuelling: litres and rupees spent on a vehicle."""

    fuel_record_id: str
    vehicle_id: str
    fuel_date: date
    fuel_amount: Decimal
    fuel_cost: Decimal
    created_at: datetime
    description: Optional[str] = None


@dataclass(frozen=True)
class FuelSummary:
    vehicle_id: str
    month: str
    total_fuel: Decimal
    total_cost: Decimal
    record_count: int

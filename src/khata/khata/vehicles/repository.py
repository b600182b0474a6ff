from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import VehicleType
from ..store.subscriptions import Listener, Unsubscribe
from .model import FuelRecord, Vehicle


class VehicleRepository(Protocol):
    def list_all(self) -> Sequence[Vehicle]:
        raise NotImplementedError

    def get_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def create(self, *, vehicle_number: str, vehicle_name: str, vehicle_type: VehicleType) -> str:
        raise NotImplementedError


class FuelRecordRepository(Protocol):
    def list_all(self) -> Sequence[FuelRecord]:
        raise NotImplementedError

    def get_by_id(self, fuel_record_id: str) -> Optional[FuelRecord]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def create(
        self,
        *,
        vehicle_id: str,
        fuel_date: date,
        fuel_amount: Decimal,
        fuel_cost: Decimal,
        description: Optional[str] = None,
    ) -> str:
        raise NotImplementedError

    def delete_by_id(self, fuel_record_id: str) -> bool:
        raise NotImplementedError

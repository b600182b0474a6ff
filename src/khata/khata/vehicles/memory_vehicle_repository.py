from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import VehicleType
from ..store.memory import InMemoryCollection
from ..store.subscriptions import Listener, Unsubscribe
from .model import FuelRecord, Vehicle
from .repository import FuelRecordRepository, VehicleRepository


class InMemoryVehicleRepository(VehicleRepository):
    def __init__(self, collection: InMemoryCollection[Vehicle] | None = None):
        self._items = collection or InMemoryCollection("vehicles", id_field="vehicle_id")

    def list_all(self) -> Sequence[Vehicle]:
        return self._items.list_all()

    def get_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        return self._items.get_by_id(vehicle_id)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._items.subscribe(listener)

    def create(self, *, vehicle_number: str, vehicle_name: str, vehicle_type: VehicleType) -> str:
        return self._items.insert(
            Vehicle(
                vehicle_id=self._items.next_id(),
                vehicle_number=vehicle_number,
                vehicle_name=vehicle_name,
                vehicle_type=vehicle_type,
                created_at=self._items.now(),
            )
        )


class InMemoryFuelRecordRepository(FuelRecordRepository):
    def __init__(self, collection: InMemoryCollection[FuelRecord] | None = None):
        self._items = collection or InMemoryCollection("fuelRecords", id_field="fuel_record_id")

    def list_all(self) -> Sequence[FuelRecord]:
        return self._items.list_all()

    def get_by_id(self, fuel_record_id: str) -> Optional[FuelRecord]:
        return self._items.get_by_id(fuel_record_id)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._items.subscribe(listener)

    def create(
        self,
        *,
        vehicle_id: str,
        fuel_date: date,
        fuel_amount: Decimal,
        fuel_cost: Decimal,
        description: Optional[str] = None,
    ) -> str:
        return self._items.insert(
            FuelRecord(
                fuel_record_id=self._items.next_id(),
                vehicle_id=str(vehicle_id),
                fuel_date=fuel_date,
                fuel_amount=fuel_amount,
                fuel_cost=fuel_cost,
                created_at=self._items.now(),
                description=description,
            )
        )

    def delete_by_id(self, fuel_record_id: str) -> bool:
        return self._items.delete(fuel_record_id)

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..common.money import money_sum
from ..common.validators import require_non_empty, require_positive_amount
from ..core.enums import VehicleType
from ..core.exceptions import NotFoundError, ValidationError
from .model import FuelRecord, FuelSummary, Vehicle
from .repository import FuelRecordRepository, VehicleRepository

logger = logging.getLogger(__name__)


class VehicleService:
    """Use case: site vehicles and their fuel spend."""

    def __init__(self, vehicles: VehicleRepository, fuel_records: FuelRecordRepository):
        self._vehicles = vehicles
        self._fuel = fuel_records

    def add_vehicle(self, *, vehicle_number: str, vehicle_name: str, vehicle_type: str = VehicleType.JCB.value) -> str:
        number = require_non_empty(vehicle_number, "Vehicle number").upper()
        name = require_non_empty(vehicle_name, "Vehicle name")
        try:
            kind = VehicleType(vehicle_type)
        except ValueError:
            raise ValidationError("Invalid vehicle type")

        vehicle_id = self._vehicles.create(vehicle_number=number, vehicle_name=name, vehicle_type=kind)
        logger.info("Added vehicle %s (%s)", vehicle_id, number)
        return vehicle_id

    def add_fuel_record(
        self,
        *,
        vehicle_id: str,
        fuel_amount: Any,
        fuel_cost: Any,
        fuel_date: date,
        description: Optional[str] = None,
    ) -> str:
        litres = require_positive_amount(fuel_amount, "Fuel amount")
        cost = require_positive_amount(fuel_cost, "Fuel cost")
        if not self._vehicles.get_by_id(vehicle_id):
            raise NotFoundError("Vehicle not found")

        record_id = self._fuel.create(
            vehicle_id=str(vehicle_id),
            fuel_date=fuel_date,
            fuel_amount=litres,
            fuel_cost=cost,
            description=(description or "").strip() or None,
        )
        logger.info("Fuel record %s for vehicle %s: %s L / %s", record_id, vehicle_id, litres, cost)
        return record_id

    def delete_fuel_record(self, fuel_record_id: str) -> None:
        if not self._fuel.delete_by_id(fuel_record_id):
            raise NotFoundError("Fuel record not found")
        logger.info("Deleted fuel record %s", fuel_record_id)

    def list_vehicles(self) -> Sequence[Vehicle]:
        return self._vehicles.list_all()

    def fuel_records_for(self, vehicle_id: str) -> list[FuelRecord]:
        return [r for r in self._fuel.list_all() if r.vehicle_id == str(vehicle_id)]

    def list_fuel_records(self) -> Sequence[FuelRecord]:
        return self._fuel.list_all()

    def monthly_fuel_summary(self, vehicle_id: str, month: str) -> FuelSummary:
        first, last = month_bounds(month)
        records = [r for r in self.fuel_records_for(vehicle_id) if first <= r.fuel_date <= last]
        return FuelSummary(
            vehicle_id=str(vehicle_id),
            month=month,
            total_fuel=money_sum(r.fuel_amount for r in records),
            total_cost=money_sum(r.fuel_cost for r in records),
            record_count=len(records),
        )

    def search(self, term: str) -> list[Vehicle]:
        term = (term or "").strip().lower()
        return [
            v
            for v in self._vehicles.list_all()
            if not term
            or term in v.vehicle_number.lower()
            or term in v.vehicle_name.lower()
            or term in v.vehicle_type.value.lower()
        ]

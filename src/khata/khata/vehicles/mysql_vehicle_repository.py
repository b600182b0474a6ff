from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import VehicleType
from ..database.mysql_base import MySQLRepository, db_cursor, fetchall, fetchone, to_decimal
from .model import FuelRecord, Vehicle
from .repository import FuelRecordRepository, VehicleRepository

_VEHICLE_COLUMNS = "vehicle_id, vehicle_number, vehicle_name, vehicle_type, created_at"
_FUEL_COLUMNS = "fuel_record_id, vehicle_id, fuel_date, fuel_amount, fuel_cost, description, created_at"


def _row_to_vehicle(r: dict) -> Vehicle:
    return Vehicle(
        vehicle_id=str(r["vehicle_id"]),
        vehicle_number=r["vehicle_number"],
        vehicle_name=r["vehicle_name"],
        vehicle_type=VehicleType(r["vehicle_type"]),
        created_at=r["created_at"],
    )


def _row_to_fuel(r: dict) -> FuelRecord:
    return FuelRecord(
        fuel_record_id=str(r["fuel_record_id"]),
        vehicle_id=str(r["vehicle_id"]),
        fuel_date=r["fuel_date"],
        fuel_amount=to_decimal(r["fuel_amount"]),
        fuel_cost=to_decimal(r["fuel_cost"]),
        created_at=r["created_at"],
        description=r.get("description"),
    )


class MySQLVehicleRepository(MySQLRepository[Vehicle], VehicleRepository):
    collection = "vehicles"

    def list_all(self) -> Sequence[Vehicle]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_VEHICLE_COLUMNS} FROM vehicles ORDER BY created_at DESC, vehicle_id DESC")
            return [_row_to_vehicle(r) for r in fetchall(cur)]

    def get_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_VEHICLE_COLUMNS} FROM vehicles WHERE vehicle_id=%s", (vehicle_id,))
            row = fetchone(cur)
            return _row_to_vehicle(row) if row else None

    def create(self, *, vehicle_number: str, vehicle_name: str, vehicle_type: VehicleType) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO vehicles(vehicle_number, vehicle_name, vehicle_type) VALUES(%s,%s,%s)",
                (vehicle_number, vehicle_name, vehicle_type.value),
            )
            new_id = str(cur.lastrowid)
        self._publish()
        return new_id


class MySQLFuelRecordRepository(MySQLRepository[FuelRecord], FuelRecordRepository):
    collection = "fuelRecords"

    def list_all(self) -> Sequence[FuelRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_FUEL_COLUMNS} FROM fuel_records ORDER BY created_at DESC, fuel_record_id DESC")
            return [_row_to_fuel(r) for r in fetchall(cur)]

    def get_by_id(self, fuel_record_id: str) -> Optional[FuelRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_FUEL_COLUMNS} FROM fuel_records WHERE fuel_record_id=%s", (fuel_record_id,))
            row = fetchone(cur)
            return _row_to_fuel(row) if row else None

    def create(
        self,
        *,
        vehicle_id: str,
        fuel_date: date,
        fuel_amount: Decimal,
        fuel_cost: Decimal,
        description: Optional[str] = None,
    ) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO fuel_records(vehicle_id, fuel_date, fuel_amount, fuel_cost, description)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (vehicle_id, fuel_date, fuel_amount, fuel_cost, description),
            )
            new_id = str(cur.lastrowid)
        self._publish()
        return new_id

    def delete_by_id(self, fuel_record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM fuel_records WHERE fuel_record_id=%s", (fuel_record_id,))
            deleted = cur.rowcount > 0
        if deleted:
            self._publish()
        return deleted

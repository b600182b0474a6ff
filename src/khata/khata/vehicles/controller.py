from __future__ import annotations

from flask import Flask, request

from ..common import datetime_utils
from ..common.web import admin_required, date_arg, json_body, login_required, month_arg, ok, to_json
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    @app.route("/vehicles", methods=["GET"], endpoint="list_vehicles")
    @login_required
    def list_vehicles():
        vehicles = container.vehicle_service.search(request.args.get("q", ""))
        return ok({"vehicles": to_json(vehicles)})

    @app.route("/vehicles", methods=["POST"], endpoint="add_vehicle")
    @admin_required
    def add_vehicle():
        data = json_body()
        vehicle_id = container.vehicle_service.add_vehicle(
            vehicle_number=data.get("vehicle_number", ""),
            vehicle_name=data.get("vehicle_name", ""),
            vehicle_type=data.get("vehicle_type") or "JCB",
        )
        return ok({"vehicle_id": vehicle_id}, 201)

    @app.route("/fuel-records", methods=["GET"], endpoint="list_fuel_records")
    @login_required
    def list_fuel_records():
        vehicle_id = request.args.get("vehicle_id")
        if vehicle_id:
            records = container.vehicle_service.fuel_records_for(vehicle_id)
        else:
            records = list(container.vehicle_service.list_fuel_records())
        return ok({"fuel_records": to_json(records)})

    @app.route("/fuel-records", methods=["POST"], endpoint="add_fuel_record")
    @admin_required
    def add_fuel_record():
        data = json_body()
        record_id = container.vehicle_service.add_fuel_record(
            vehicle_id=str(data.get("vehicle_id", "")),
            fuel_amount=data.get("fuel_amount"),
            fuel_cost=data.get("fuel_cost"),
            fuel_date=date_arg(data.get("fuel_date"), "Fuel date", default=datetime_utils.now_local().date()),
            description=data.get("description"),
        )
        return ok({"fuel_record_id": record_id}, 201)

    @app.route("/fuel-records/<fuel_record_id>", methods=["DELETE"], endpoint="delete_fuel_record")
    @admin_required
    def delete_fuel_record(fuel_record_id: str):
        container.vehicle_service.delete_fuel_record(fuel_record_id)
        return ok({"message": "Fuel record deleted"})

    @app.route("/vehicles/<vehicle_id>/fuel-summary", methods=["GET"], endpoint="fuel_summary")
    @login_required
    def fuel_summary(vehicle_id: str):
        if not container.vehicles_repo.get_by_id(vehicle_id):
            raise NotFoundError("Vehicle not found")
        summary = container.vehicle_service.monthly_fuel_summary(vehicle_id, month_arg(request.args.get("month")))
        return ok({"summary": to_json(summary)})

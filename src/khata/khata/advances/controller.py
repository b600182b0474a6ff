from __future__ import annotations

from flask import Flask

from ..common import datetime_utils
from ..common.web import admin_required, date_arg, json_body, login_required, ok, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/advances", methods=["GET"], endpoint="list_advances")
    @login_required
    def list_advances():
        advances = container.advance_service.list_all()
        return ok(
            {
                "advances": to_json(list(advances)),
                "total": str(container.advance_service.total()),
            }
        )

    @app.route("/advances", methods=["POST"], endpoint="create_advance")
    @admin_required
    def create_advance():
        data = json_body()
        advance_id = container.advance_service.create(
            employee_id=str(data.get("employee_id", "")),
            amount=data.get("amount"),
            advance_date=date_arg(data.get("advance_date"), "Advance date", default=datetime_utils.now_local().date()),
            description=data.get("description", "") or "",
        )
        return ok({"advance_id": advance_id}, 201)

    @app.route("/advances/<advance_id>", methods=["DELETE"], endpoint="delete_advance")
    @admin_required
    def delete_advance(advance_id: str):
        container.advance_service.delete(advance_id)
        return ok({"message": "Advance deleted"})

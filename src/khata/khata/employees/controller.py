from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, json_body, login_required, ok, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _employee_json(employee) -> dict:
        data = to_json(employee)
        data["initials"] = employee.initials
        return data

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        employees = container.employee_service.search(request.args.get("q", ""))
        return ok({"employees": [_employee_json(e) for e in employees]})

    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(employee_id: str):
        return ok({"employee": _employee_json(container.employee_service.get(employee_id))})

    @app.route("/employees", methods=["POST"], endpoint="create_employee")
    @admin_required
    def create_employee():
        data = json_body()
        employee_id = container.employee_service.create(
            name=data.get("name", ""),
            designation=data.get("designation", ""),
            contact_number=data.get("contact_number", ""),
            daily_wage=data.get("daily_wage"),
            photo=data.get("photo") or None,
        )
        return ok({"employee_id": employee_id}, 201)

    @app.route("/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        container.employee_service.delete(employee_id)
        return ok({"message": "Employee deleted"})

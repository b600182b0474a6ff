from __future__ import annotations

from flask import Flask, request

from ..common import datetime_utils
from ..common.web import admin_required, date_arg, json_body, login_required, ok, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _today():
        return datetime_utils.now_local().date()

    @app.route("/payments", methods=["GET"], endpoint="payment_console")
    @login_required
    def payment_console():
        """Weekly balances plus the payment ledger, optionally for one employee."""
        week = datetime_utils.week_start(date_arg(request.args.get("week"), "Week", default=_today()))
        employee_id = request.args.get("employee_id") or None

        if employee_id:
            container.employee_service.get(employee_id)
            summaries = [container.payroll_service.weekly_summary(employee_id, week)]
            payments = container.payment_service.list_for_employee(employee_id)
        else:
            summaries = container.payroll_service.weekly_summaries(week)
            payments = list(container.payment_service.list_all())

        return ok(
            {
                "week_start": week.isoformat(),
                "summaries": [s.to_dict() for s in summaries],
                "payments": [dict(to_json(p), is_reversal=p.is_reversal) for p in payments],
            }
        )

    @app.route("/payments", methods=["POST"], endpoint="record_payment")
    @admin_required
    def record_payment():
        data = json_body()
        payment_id = container.payment_service.record(
            employee_id=str(data.get("employee_id", "")),
            amount=data.get("amount"),
            payment_date=date_arg(data.get("payment_date"), "Payment date", default=_today()),
            description=data.get("description", "") or "",
        )
        return ok({"payment_id": payment_id}, 201)

    @app.route("/payments/<payment_id>/reverse", methods=["POST"], endpoint="reverse_payment")
    @admin_required
    def reverse_payment(payment_id: str):
        data = json_body()
        reversal_id = container.payment_service.reverse(
            payment_id=payment_id,
            reason=data.get("reason", "") or "",
            payment_date=date_arg(data.get("payment_date"), "Payment date", default=None),
        )
        return ok({"payment_id": reversal_id}, 201)

from __future__ import annotations

from flask import Flask, request

from ..common import datetime_utils
from ..common.validators import parse_amount
from ..common.web import admin_required, date_arg, json_body, login_required, ok, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _today():
        return datetime_utils.now_local().date()

    def _optional_amount(value, field_name: str):
        if value is None or value == "":
            return None
        return parse_amount(value, field_name)

    @app.route("/attendance", methods=["GET"], endpoint="attendance_week")
    @login_required
    def attendance_week():
        today = _today()
        week = datetime_utils.week_start(date_arg(request.args.get("week"), "Week", default=today))
        rows = container.attendance_service.week_grid(week, today=today)
        return ok(
            {
                "week_start": week.isoformat(),
                "week_end": datetime_utils.week_end(week).isoformat(),
                "edit_window": container.attendance_service.edit_window.value,
                "rows": rows,
            }
        )

    @app.route("/attendance/<employee_id>/<work_date>", methods=["POST"], endpoint="mark_attendance")
    @admin_required
    def mark_attendance(employee_id: str, work_date: str):
        data = json_body()
        day = date_arg(work_date, "Date", default=_today())
        record = container.attendance_service.mark(
            employee_id=employee_id,
            work_date=day,
            action=data.get("action", ""),
            today=_today(),
            hours=_optional_amount(data.get("hours"), "Hours"),
            amount=_optional_amount(data.get("amount"), "Amount"),
            note=data.get("note") or None,
        )
        payload = to_json(record)
        payload["custom_type"] = record.custom_type
        return ok({"record": payload})

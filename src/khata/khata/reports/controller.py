from __future__ import annotations

from flask import Flask, request

from ..common import datetime_utils
from ..common.web import date_arg, login_required, month_arg, ok, to_json
from ..container import Container
from ..payroll.model import DashboardSummary, EarningsBucket, MonthlyReport
from .payslip import render_month_csv, render_text


def _bucket_json(bucket: EarningsBucket) -> dict:
    return {"count": bucket.count, "total": str(bucket.total)}


def _report_json(report: MonthlyReport) -> dict:
    return {
        "employee_id": report.employee_id,
        "month": report.month,
        "summary": report.summary.to_dict(),
        "attendance": [dict(to_json(r), custom_type=r.custom_type) for r in report.attendance_details],
        "advances": to_json(list(report.advance_details)),
        "payments": to_json(list(report.payment_details)),
        "overtime": _bucket_json(report.overtime),
        "half_day": _bucket_json(report.half_day),
        "custom": _bucket_json(report.custom),
    }


def _dashboard_json(dashboard: DashboardSummary) -> dict:
    return {
        "as_of": dashboard.as_of.isoformat(),
        "week_start": dashboard.week_start.isoformat(),
        "total_employees": dashboard.total_employees,
        "present_today": dashboard.present_today,
        "total_week_wages": str(dashboard.total_week_wages),
        "total_week_advances": str(dashboard.total_week_advances),
        "total_week_paid": str(dashboard.total_week_paid),
        "rows": [
            {
                "employee_id": row.employee.employee_id,
                "name": row.employee.name,
                "designation": row.employee.designation,
                "overtime_days": row.overtime_days,
                "half_days": row.half_days,
                "custom_days": row.custom_days,
                "summary": row.summary.to_dict(),
            }
            for row in dashboard.rows
        ],
        "recent_advances": to_json(list(dashboard.recent_advances)),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        as_of = date_arg(request.args.get("as_of"), "Date", default=datetime_utils.now_local().date())
        return ok({"dashboard": _dashboard_json(container.payroll_service.dashboard(as_of))})

    @app.route("/reports/monthly", methods=["GET"], endpoint="monthly_reports")
    @login_required
    def monthly_reports():
        month = month_arg(request.args.get("month"))
        return ok(
            {
                "month": month,
                "payslips": [p.to_dict() for p in container.report_service.payslips(month)],
            }
        )

    @app.route("/reports/monthly/<employee_id>", methods=["GET"], endpoint="monthly_report")
    @login_required
    def monthly_report(employee_id: str):
        month = month_arg(request.args.get("month"))
        payslip = container.report_service.payslip(employee_id, month)
        report = container.payroll_service.monthly_report(employee_id, month)
        return ok({"payslip": payslip.to_dict(), "report": _report_json(report)})

    @app.route("/reports/monthly/<employee_id>/payslip.txt", methods=["GET"], endpoint="payslip_text")
    @login_required
    def payslip_text(employee_id: str):
        month = month_arg(request.args.get("month"))
        payslip = container.report_service.payslip(employee_id, month)
        body = render_text(payslip, generated_on=datetime_utils.now_local().date())
        filename = f"payslip_{payslip.employee_name.replace(' ', '_')}_{month}.txt"
        return app.response_class(
            body,
            mimetype="text/plain",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/reports/monthly.csv", methods=["GET"], endpoint="monthly_csv")
    @login_required
    def monthly_csv():
        month = month_arg(request.args.get("month"))
        csv_bytes = render_month_csv(container.report_service.payslips(month))
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=payroll_{month}.csv"},
        )

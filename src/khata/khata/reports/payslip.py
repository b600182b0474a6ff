"""Payslip assembly and rendering.

Only formats what the derivation model already computed; no arithmetic
beyond reading report fields.
"""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence

from ..common.datetime_utils import format_date, month_label
from ..common.money import format_currency
from ..core.enums import BalanceStatus
from ..employees.model import Employee
from ..payroll.model import EarningsBucket, MonthlyReport


@dataclass(frozen=True)
class PayslipLine:
    label: str
    count: int
    amount: Decimal


@dataclass(frozen=True)
class Payslip:
    employee_id: str
    employee_name: str
    designation: str
    contact_number: str
    daily_wage: Decimal
    month: str
    period_label: str
    days_worked: int
    base_wages: Decimal
    additional_lines: Sequence[PayslipLine]
    additional_earnings: Decimal
    total_earnings: Decimal
    advances: Decimal
    salary_paid: Decimal
    net_payable: Decimal
    status: BalanceStatus
    status_label: str

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "designation": self.designation,
            "contact_number": self.contact_number,
            "daily_wage": str(self.daily_wage),
            "month": self.month,
            "period_label": self.period_label,
            "days_worked": self.days_worked,
            "base_wages": str(self.base_wages),
            "additional_lines": [
                {"label": line.label, "count": line.count, "amount": str(line.amount)}
                for line in self.additional_lines
            ],
            "additional_earnings": str(self.additional_earnings),
            "total_earnings": str(self.total_earnings),
            "advances": str(self.advances),
            "salary_paid": str(self.salary_paid),
            "net_payable": str(self.net_payable),
            "status": self.status.value,
            "status_label": self.status_label,
        }


def _line(label: str, bucket: EarningsBucket) -> PayslipLine:
    return PayslipLine(label=label, count=bucket.count, amount=bucket.total)


def build_payslip(employee: Employee, report: MonthlyReport) -> Payslip:
    lines = [
        _line("Overtime", report.overtime),
        _line("Half Days", report.half_day),
        _line("Custom Payments", report.custom),
    ]
    return Payslip(
        employee_id=employee.employee_id,
        employee_name=employee.name,
        designation=employee.designation,
        contact_number=employee.contact_number,
        daily_wage=employee.daily_wage,
        month=report.month,
        period_label=month_label(report.month),
        days_worked=report.total_days_worked,
        base_wages=report.base_wages,
        additional_lines=tuple(line for line in lines if line.count),
        additional_earnings=report.additional_earnings,
        total_earnings=report.total_wages_earned,
        advances=report.total_advances_taken,
        salary_paid=report.total_salary_paid,
        net_payable=report.final_amount,
        status=report.summary.balance_status,
        status_label=report.summary.balance_label,
    )


def render_text(payslip: Payslip, *, generated_on: date) -> str:
    out = [
        "MONTHLY PAYSLIP REPORT",
        "======================",
        "",
        "Employee Details:",
        f"Name: {payslip.employee_name}",
        f"Designation: {payslip.designation}",
        f"Contact: {payslip.contact_number}",
        f"Daily Wage: {format_currency(payslip.daily_wage)}",
        "",
        f"Report Period: {payslip.period_label}",
        "",
        "EARNINGS BREAKDOWN:",
        (
            f"Base Wages ({payslip.days_worked} days x {format_currency(payslip.daily_wage)}): "
            f"{format_currency(payslip.base_wages)}"
        ),
        f"Additional Earnings: {format_currency(payslip.additional_earnings)}",
    ]
    for line in payslip.additional_lines:
        unit = "days" if line.label != "Custom Payments" else "entries"
        out.append(f"  {line.label} ({line.count} {unit}): {format_currency(line.amount)}")
    out += [
        f"Total Wages Earned: {format_currency(payslip.total_earnings)}",
        "",
        "DEDUCTIONS:",
        f"Advances Taken: {format_currency(payslip.advances)}",
        f"Salary Already Paid: {format_currency(payslip.salary_paid)}",
        "",
        "FINAL CALCULATION:",
        f"Total Wages Earned: {format_currency(payslip.total_earnings)}",
        f"Less: Advances: {format_currency(payslip.advances)}",
        f"Less: Salary Paid: {format_currency(payslip.salary_paid)}",
        f"Final Amount: {format_currency(payslip.net_payable)} ({payslip.status_label})",
        "",
        f"Generated on: {format_date(generated_on)}",
        "",
    ]
    return "\n".join(out)


MONTH_CSV_FIELDS = [
    "month",
    "employee_id",
    "employee_name",
    "designation",
    "days_worked",
    "base_wages",
    "additional_earnings",
    "total_earnings",
    "advances",
    "salary_paid",
    "net_payable",
    "status",
]


def render_month_csv(payslips: Iterable[Payslip]) -> bytes:
    """All-employee monthly summary as CSV (UTF-8 with BOM for spreadsheet apps)."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=MONTH_CSV_FIELDS)
    writer.writeheader()
    for p in payslips:
        writer.writerow(
            {
                "month": p.month,
                "employee_id": p.employee_id,
                "employee_name": p.employee_name,
                "designation": p.designation,
                "days_worked": p.days_worked,
                "base_wages": str(p.base_wages),
                "additional_earnings": str(p.additional_earnings),
                "total_earnings": str(p.total_earnings),
                "advances": str(p.advances),
                "salary_paid": str(p.salary_paid),
                "net_payable": str(p.net_payable),
                "status": p.status.value,
            }
        )
    return out.getvalue().encode("utf-8-sig")

from __future__ import annotations

import csv
import io
from datetime import date
from decimal import Decimal

import pytest

from src.khata.khata.advances.memory_advance_repository import InMemoryAdvanceRepository
from src.khata.khata.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.khata.khata.attendance.service import AttendanceService
from src.khata.khata.core.enums import BalanceStatus, EditWindow
from src.khata.khata.core.exceptions import NotFoundError
from src.khata.khata.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.khata.khata.payments.memory_payment_repository import InMemorySalaryPaymentRepository
from src.khata.khata.payroll.service import PayrollService
from src.khata.khata.reports.payslip import MONTH_CSV_FIELDS, render_month_csv, render_text
from src.khata.khata.reports.service import ReportService

TODAY = date(2025, 10, 31)


@pytest.fixture()
def world():
    employees = InMemoryEmployeeRepository()
    attendance = InMemoryAttendanceRepository()
    advances = InMemoryAdvanceRepository()
    payments = InMemorySalaryPaymentRepository()

    emp_id = employees.create(
        name="Mohan Lal",
        designation="Operator",
        contact_number="9988776655",
        daily_wage=Decimal("800"),
    )
    employees.create(name="Idle", designation="Helper", contact_number="1", daily_wage=Decimal("300"))

    marks = AttendanceService(attendance, employees, edit_window=EditWindow.ANY)
    marks.mark(employee_id=emp_id, work_date=date(2025, 10, 6), action="present", today=TODAY)
    marks.mark(employee_id=emp_id, work_date=date(2025, 10, 7), action="overtime", hours=Decimal("4"), today=TODAY)
    marks.mark(employee_id=emp_id, work_date=date(2025, 10, 8), action="custom", amount=Decimal("250"), today=TODAY)
    marks.mark(employee_id=emp_id, work_date=date(2025, 10, 9), action="absent", today=TODAY)
    marks.mark(employee_id=emp_id, work_date=date(2025, 11, 3), action="present", today=TODAY)

    advances.create(
        employee_id=emp_id,
        employee_name="Mohan Lal",
        amount=Decimal("500"),
        advance_date=date(2025, 10, 7),
        description="",
    )
    payments.create(employee_id=emp_id, amount=Decimal("1000"), payment_date=date(2025, 10, 12), description="")

    payroll = PayrollService(employees, attendance, advances, payments)
    return ReportService(payroll, employees), emp_id


def test_payslip_numbers(world):
    reports, emp_id = world
    slip = reports.payslip(emp_id, "2025-10")

    assert slip.period_label == "October 2025"
    assert slip.days_worked == 3
    assert slip.base_wages == Decimal("2400")
    assert slip.additional_earnings == Decimal("850.00")
    assert slip.total_earnings == Decimal("3250.00")
    assert slip.advances == Decimal("500")
    assert slip.salary_paid == Decimal("1000")
    assert slip.net_payable == Decimal("1750.00")
    assert slip.status == BalanceStatus.DUE
    assert [(line.label, line.count) for line in slip.additional_lines] == [("Overtime", 1), ("Custom Payments", 1)]


def test_payslip_for_unknown_employee(world):
    reports, _ = world
    with pytest.raises(NotFoundError):
        reports.payslip("404", "2025-10")


def test_render_text(world):
    reports, emp_id = world
    text = render_text(reports.payslip(emp_id, "2025-10"), generated_on=TODAY)

    assert text.startswith("MONTHLY PAYSLIP REPORT")
    assert "Name: Mohan Lal" in text
    assert "Base Wages (3 days x ₹800.00): ₹2,400.00" in text
    assert "  Overtime (1 days): ₹600.00" in text
    assert "  Custom Payments (1 entries): ₹250.00" in text
    assert "Half Days" not in text
    assert "Final Amount: ₹1,750.00 (Balance due: ₹1,750.00)" in text
    assert "Generated on: Fri, 31 Oct 2025" in text


def test_month_csv_has_one_row_per_employee(world):
    reports, emp_id = world
    payload = render_month_csv(reports.payslips("2025-10"))

    assert payload.startswith(b"\xef\xbb\xbf")
    rows = list(csv.DictReader(io.StringIO(payload.decode("utf-8-sig"))))
    assert list(rows[0].keys()) == MONTH_CSV_FIELDS
    assert len(rows) == 2
    by_id = {r["employee_id"]: r for r in rows}
    assert by_id[emp_id]["net_payable"] == "1750.00"
    idle = next(r for r in rows if r["employee_id"] != emp_id)
    assert idle["total_earnings"] == "0"
    assert idle["status"] == BalanceStatus.FULLY_PAID.value

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..advances.model import Advance
from ..attendance.model import AttendanceRecord
from ..common.money import ZERO, format_currency
from ..core.enums import BalanceStatus
from ..employees.model import Employee
from ..payments.model import SalaryPayment


def balance_status(amount: Decimal) -> BalanceStatus:
    if amount == 0:
        return BalanceStatus.FULLY_PAID
    if amount > 0:
        return BalanceStatus.DUE
    return BalanceStatus.OVERPAID


def balance_label(amount: Decimal) -> str:
    status = balance_status(amount)
    if status == BalanceStatus.FULLY_PAID:
        return "Fully paid"
    if status == BalanceStatus.DUE:
        return f"Balance due: {format_currency(amount)}"
    return f"Overpaid by {format_currency(abs(amount))}"


@dataclass(frozen=True)
class PayrollSnapshot:
    """The four collections the derivation reads, frozen at one moment."""

    employees: Sequence[Employee] = ()
    attendance: Sequence[AttendanceRecord] = ()
    advances: Sequence[Advance] = ()
    payments: Sequence[SalaryPayment] = ()

    def employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.employee_id == str(employee_id)), None)

    def daily_wage(self, employee_id: str) -> Decimal:
        employee = self.employee(employee_id)
        if employee is None or employee.daily_wage is None:
            return ZERO
        return employee.daily_wage


@dataclass(frozen=True)
class PeriodSummary:
    """Pay figures for one employee over one window (a week or a month)."""

    employee_id: str
    start: date
    end: date
    days_worked: int
    base_wages: Decimal
    additional_earnings: Decimal
    advances: Decimal
    salary_paid: Decimal

    @property
    def total_wages(self) -> Decimal:
        return self.base_wages + self.additional_earnings

    @property
    def remaining_balance(self) -> Decimal:
        return self.total_wages - self.advances - self.salary_paid

    @property
    def balance_status(self) -> BalanceStatus:
        return balance_status(self.remaining_balance)

    @property
    def balance_label(self) -> str:
        return balance_label(self.remaining_balance)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "days_worked": self.days_worked,
            "base_wages": str(self.base_wages),
            "additional_earnings": str(self.additional_earnings),
            "total_wages": str(self.total_wages),
            "advances": str(self.advances),
            "salary_paid": str(self.salary_paid),
            "remaining_balance": str(self.remaining_balance),
            "balance_status": self.balance_status.value,
            "balance_label": self.balance_label,
        }


@dataclass(frozen=True)
class EarningsBucket:
    """Attendance days of one extra-pay category (overtime, half-day, custom)."""

    records: Sequence[AttendanceRecord] = ()

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def total(self) -> Decimal:
        return sum((r.custom_amount or ZERO for r in self.records), ZERO)


@dataclass(frozen=True)
class MonthlyReport:
    employee_id: str
    month: str
    summary: PeriodSummary
    attendance_details: Sequence[AttendanceRecord] = ()
    advance_details: Sequence[Advance] = ()
    payment_details: Sequence[SalaryPayment] = ()
    overtime: EarningsBucket = field(default_factory=EarningsBucket)
    half_day: EarningsBucket = field(default_factory=EarningsBucket)
    custom: EarningsBucket = field(default_factory=EarningsBucket)

    @property
    def total_days_worked(self) -> int:
        return self.summary.days_worked

    @property
    def base_wages(self) -> Decimal:
        return self.summary.base_wages

    @property
    def additional_earnings(self) -> Decimal:
        return self.summary.additional_earnings

    @property
    def total_wages_earned(self) -> Decimal:
        return self.summary.total_wages

    @property
    def total_advances_taken(self) -> Decimal:
        return self.summary.advances

    @property
    def total_salary_paid(self) -> Decimal:
        return self.summary.salary_paid

    @property
    def final_amount(self) -> Decimal:
        return self.summary.remaining_balance


@dataclass(frozen=True)
class EmployeeWeekRow:
    employee: Employee
    summary: PeriodSummary
    overtime_days: int
    half_days: int
    custom_days: int


@dataclass(frozen=True)
class DashboardSummary:
    as_of: date
    week_start: date
    total_employees: int
    present_today: int
    total_week_wages: Decimal
    total_week_advances: Decimal
    total_week_paid: Decimal
    rows: Sequence[EmployeeWeekRow] = ()
    recent_advances: Sequence[Advance] = ()

from __future__ import annotations

from datetime import date
from typing import Optional

from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..employees.repository import EmployeeRepository
from ..payments.repository import SalaryPaymentRepository
from . import derivation
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import DashboardSummary, MonthlyReport, PayrollSnapshot, PeriodSummary


class PayrollService:
    """Loads the current records and hands them to the pure derivation model."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        payments: SalaryPaymentRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._advances = advances
        self._payments = payments
        self._calculator = calculator or StandardPayrollCalculator()

    @property
    def calculator(self) -> PayrollCalculator:
        return self._calculator

    def snapshot(self) -> PayrollSnapshot:
        return PayrollSnapshot(
            employees=tuple(self._employees.list_all()),
            attendance=tuple(self._attendance.list_all()),
            advances=tuple(self._advances.list_all()),
            payments=tuple(self._payments.list_all()),
        )

    def weekly_summary(self, employee_id: str, week: date) -> PeriodSummary:
        return derivation.weekly_summary(self.snapshot(), employee_id, week, self._calculator)

    def weekly_summaries(self, week: date) -> list[PeriodSummary]:
        """Payment console: every employee's balance for one week."""
        snap = self.snapshot()
        return [
            derivation.weekly_summary(snap, e.employee_id, week, self._calculator)
            for e in snap.employees
        ]

    def monthly_report(self, employee_id: str, month: str) -> MonthlyReport:
        return derivation.monthly_report(self.snapshot(), employee_id, month, self._calculator)

    def monthly_reports(self, month: str) -> list[MonthlyReport]:
        snap = self.snapshot()
        return [
            derivation.monthly_report(snap, e.employee_id, month, self._calculator)
            for e in snap.employees
        ]

    def dashboard(self, as_of: date) -> DashboardSummary:
        return derivation.dashboard_summary(self.snapshot(), as_of, self._calculator)

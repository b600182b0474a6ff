from __future__ import annotations

from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..payroll.service import PayrollService
from .payslip import Payslip, build_payslip


class ReportService:
    def __init__(self, payroll: PayrollService, employees: EmployeeRepository):
        self._payroll = payroll
        self._employees = employees

    def payslip(self, employee_id: str, month: str) -> Payslip:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return build_payslip(employee, self._payroll.monthly_report(employee_id, month))

    def payslips(self, month: str) -> list[Payslip]:
        by_id = {e.employee_id: e for e in self._employees.list_all()}
        return [
            build_payslip(by_id[report.employee_id], report)
            for report in self._payroll.monthly_reports(month)
            if report.employee_id in by_id
        ]

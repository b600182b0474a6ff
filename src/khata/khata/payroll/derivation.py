"""Payroll derivation: attendance -> wages -> advances -> salary paid -> balance.

Every function here is pure. Callers pass the records (a PayrollSnapshot) and
the window explicitly; nothing reads the clock or a store. Dashboard, payment
console and monthly report all build the same PeriodSummary so they agree on the
numbers.

Weekly windows key on the canonical Monday week start. Monthly windows use the
inclusive calendar-month date range.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Optional

from ..advances.model import Advance
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_bounds, week_end, week_start
from ..common.money import money_sum
from ..core.constants import DEFAULT_RECENT_ADVANCES
from ..core.enums import DayStatus
from ..payments.model import SalaryPayment
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import (
    DashboardSummary,
    EarningsBucket,
    EmployeeWeekRow,
    MonthlyReport,
    PayrollSnapshot,
    PeriodSummary,
)

DatePredicate = Callable[[date], bool]

_DEFAULT_CALCULATOR = StandardPayrollCalculator()


def _calc(calculator: Optional[PayrollCalculator]) -> PayrollCalculator:
    return calculator or _DEFAULT_CALCULATOR


def _in_week(key: date) -> DatePredicate:
    key = week_start(key)
    return lambda d: week_start(d) == key


def _in_range(start: date, end: date) -> DatePredicate:
    return lambda d: start <= d <= end


def _attendance_for(snapshot: PayrollSnapshot, employee_id: str, in_window: DatePredicate) -> list[AttendanceRecord]:
    return [
        r
        for r in snapshot.attendance
        if r.employee_id == str(employee_id) and in_window(r.work_date)
    ]


def _advances_for(snapshot: PayrollSnapshot, employee_id: str, in_window: DatePredicate) -> list[Advance]:
    return [
        a
        for a in snapshot.advances
        if a.employee_id == str(employee_id) and in_window(a.advance_date)
    ]


def _payments_for(snapshot: PayrollSnapshot, employee_id: str, in_window: DatePredicate) -> list[SalaryPayment]:
    return [
        p
        for p in snapshot.payments
        if p.employee_id == str(employee_id) and in_window(p.payment_date)
    ]


def wages_for(
    records: Iterable[AttendanceRecord],
    daily_wage: Decimal,
    calculator: Optional[PayrollCalculator] = None,
) -> tuple[Decimal, Decimal]:
    """(base wages, additional earnings) for a set of attendance days."""
    calc = _calc(calculator)
    records = list(records)
    base = money_sum(calc.base_wage(r, daily_wage) for r in records)
    extra = money_sum(calc.extra_pay(r) for r in records)
    return base, extra


def weekly_wages(
    snapshot: PayrollSnapshot,
    employee_id: str,
    week: date,
    calculator: Optional[PayrollCalculator] = None,
) -> Decimal:
    key = week_start(week)
    records = [
        r
        for r in snapshot.attendance
        if r.employee_id == str(employee_id) and r.week_start == key
    ]
    base, extra = wages_for(records, snapshot.daily_wage(employee_id), calculator)
    return base + extra


def weekly_advances(snapshot: PayrollSnapshot, employee_id: str, week: date) -> Decimal:
    return money_sum(a.amount for a in _advances_for(snapshot, employee_id, _in_week(week)))


def weekly_balance(
    snapshot: PayrollSnapshot,
    employee_id: str,
    week: date,
    calculator: Optional[PayrollCalculator] = None,
) -> Decimal:
    """Wages minus advances for the week, before salary payments."""
    return weekly_wages(snapshot, employee_id, week, calculator) - weekly_advances(snapshot, employee_id, week)


def _summarize(
    snapshot: PayrollSnapshot,
    employee_id: str,
    start: date,
    end: date,
    in_window: DatePredicate,
    calculator: Optional[PayrollCalculator],
) -> PeriodSummary:
    records = _attendance_for(snapshot, employee_id, in_window)
    base, extra = wages_for(records, snapshot.daily_wage(employee_id), calculator)
    return PeriodSummary(
        employee_id=str(employee_id),
        start=start,
        end=end,
        days_worked=sum(1 for r in records if r.present),
        base_wages=base,
        additional_earnings=extra,
        advances=money_sum(a.amount for a in _advances_for(snapshot, employee_id, in_window)),
        salary_paid=money_sum(p.amount for p in _payments_for(snapshot, employee_id, in_window)),
    )


def summarize_period(
    snapshot: PayrollSnapshot,
    employee_id: str,
    start: date,
    end: date,
    calculator: Optional[PayrollCalculator] = None,
) -> PeriodSummary:
    """Canonical pay summary over an inclusive date range."""
    return _summarize(snapshot, employee_id, start, end, _in_range(start, end), calculator)


def weekly_summary(
    snapshot: PayrollSnapshot,
    employee_id: str,
    week: date,
    calculator: Optional[PayrollCalculator] = None,
) -> PeriodSummary:
    key = week_start(week)
    return _summarize(snapshot, employee_id, key, week_end(key), _in_week(key), calculator)


def remaining_balance(
    snapshot: PayrollSnapshot,
    employee_id: str,
    week: date,
    calculator: Optional[PayrollCalculator] = None,
) -> Decimal:
    return weekly_summary(snapshot, employee_id, week, calculator).remaining_balance


def _bucket(records: Iterable[AttendanceRecord], status: DayStatus) -> EarningsBucket:
    return EarningsBucket(records=tuple(r for r in records if r.status == status))


def monthly_report(
    snapshot: PayrollSnapshot,
    employee_id: str,
    month: str,
    calculator: Optional[PayrollCalculator] = None,
) -> MonthlyReport:
    first, last = month_bounds(month)
    in_month = _in_range(first, last)
    attendance = sorted(_attendance_for(snapshot, employee_id, in_month), key=lambda r: r.work_date)
    return MonthlyReport(
        employee_id=str(employee_id),
        month=month,
        summary=_summarize(snapshot, employee_id, first, last, in_month, calculator),
        attendance_details=tuple(attendance),
        advance_details=tuple(sorted(_advances_for(snapshot, employee_id, in_month), key=lambda a: a.advance_date)),
        payment_details=tuple(sorted(_payments_for(snapshot, employee_id, in_month), key=lambda p: p.payment_date)),
        overtime=_bucket(attendance, DayStatus.OVERTIME),
        half_day=_bucket(attendance, DayStatus.HALF_DAY),
        custom=_bucket(attendance, DayStatus.CUSTOM),
    )


def dashboard_summary(
    snapshot: PayrollSnapshot,
    as_of: date,
    calculator: Optional[PayrollCalculator] = None,
    *,
    recent_advances: int = DEFAULT_RECENT_ADVANCES,
) -> DashboardSummary:
    key = week_start(as_of)
    rows = []
    for employee in snapshot.employees:
        summary = weekly_summary(snapshot, employee.employee_id, key, calculator)
        week_records = [
            r
            for r in snapshot.attendance
            if r.employee_id == employee.employee_id and r.week_start == key
        ]
        rows.append(
            EmployeeWeekRow(
                employee=employee,
                summary=summary,
                overtime_days=sum(1 for r in week_records if r.status == DayStatus.OVERTIME),
                half_days=sum(1 for r in week_records if r.status == DayStatus.HALF_DAY),
                custom_days=sum(1 for r in week_records if r.status == DayStatus.CUSTOM),
            )
        )

    week_advances = [a for a in snapshot.advances if week_start(a.advance_date) == key]
    known = {e.employee_id for e in snapshot.employees}
    return DashboardSummary(
        as_of=as_of,
        week_start=key,
        total_employees=len(snapshot.employees),
        present_today=sum(
            1
            for r in snapshot.attendance
            if r.work_date == as_of and r.present and r.employee_id in known
        ),
        total_week_wages=money_sum(row.summary.total_wages for row in rows),
        total_week_advances=money_sum(a.amount for a in week_advances if a.employee_id in known),
        total_week_paid=money_sum(row.summary.salary_paid for row in rows),
        rows=tuple(rows),
        recent_advances=tuple(
            sorted(week_advances, key=lambda a: (a.advance_date, a.created_at), reverse=True)[:recent_advances]
        ),
    )

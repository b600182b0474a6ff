from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import week_days, week_start
from ..core.enums import AttendanceAction, DayStatus, EditWindow
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .factory import AttendanceTransitionFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceCellUI:
    date: str
    status: str
    label: str
    css_class: str
    editable: bool
    custom_amount: Optional[str] = None


_LABELS = {
    DayStatus.NOT_MARKED: ("Not marked", "bg-light text-muted"),
    DayStatus.ABSENT: ("Absent", "bg-danger"),
    DayStatus.PRESENT: ("Present", "bg-success"),
    DayStatus.PRESENT_LATE: ("Late", "bg-warning text-dark"),
    DayStatus.OVERTIME: ("Overtime", "bg-primary"),
    DayStatus.HALF_DAY: ("Half day", "bg-orange"),
    DayStatus.CUSTOM: ("Custom", "bg-info"),
}


def is_editable(work_date: date, *, today: date, window: EditWindow) -> bool:
    if window == EditWindow.ANY:
        return True
    if window == EditWindow.CURRENT_WEEK:
        return week_start(work_date) == week_start(today)
    return work_date == today


class AttendanceService:
    """Use case: mark attendance cells through the state machine.

    Each (employee, date) pair holds at most one record: the first action
    creates it, later actions overwrite it in place.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        transition_factory: AttendanceTransitionFactory | None = None,
        edit_window: EditWindow = EditWindow.TODAY,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = transition_factory or AttendanceTransitionFactory()
        self._edit_window = EditWindow(edit_window)

    @property
    def edit_window(self) -> EditWindow:
        return self._edit_window

    def mark(
        self,
        *,
        employee_id: str,
        work_date: date,
        action: AttendanceAction | str,
        today: date,
        hours: Optional[Decimal] = None,
        amount: Optional[Decimal] = None,
        note: Optional[str] = None,
    ) -> AttendanceRecord:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        if not is_editable(work_date, today=today, window=self._edit_window):
            logger.warning("Rejected %s for %s on %s (window=%s)", action, employee_id, work_date, self._edit_window.value)
            raise ValidationError("This date cannot be changed")

        transition = self._factory.for_action(action)
        existing = self._attendance.get_for_employee_and_date(employee_id, work_date)
        mark = transition.apply(current=existing, employee=employee, hours=hours, amount=amount)

        if existing:
            self._attendance.update(attendance_id=existing.attendance_id, mark=mark, note=note)
            attendance_id = existing.attendance_id
        else:
            attendance_id = self._attendance.create(
                employee_id=employee_id,
                work_date=work_date,
                mark=mark,
                note=note,
            )

        logger.info("Attendance %s for employee %s on %s -> %s", attendance_id, employee_id, work_date, mark.status.value)
        record = self._attendance.get_by_id(attendance_id)
        if record is None:
            raise NotFoundError("Attendance record disappeared after write")
        return record

    def day_status(self, employee_id: str, work_date: date) -> DayStatus:
        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        return record.status if record else DayStatus.NOT_MARKED

    def week_grid(self, week: date, *, today: date) -> list[dict]:
        """Per-employee row of seven cells for the week starting ``week``."""
        week = week_start(week)
        days = week_days(week)
        by_key = {
            (r.employee_id, r.work_date): r
            for r in self._attendance.list_all()
            if r.week_start == week
        }

        rows = []
        for employee in self._employees.list_all():
            cells = [
                self._to_ui(by_key.get((employee.employee_id, d)), d, today=today)
                for d in days
            ]
            rows.append(
                {
                    "employee_id": employee.employee_id,
                    "name": employee.name,
                    "designation": employee.designation,
                    "cells": [cell.__dict__ for cell in cells],
                }
            )
        return rows

    def _to_ui(self, record: Optional[AttendanceRecord], d: date, *, today: date) -> AttendanceCellUI:
        status = record.status if record else DayStatus.NOT_MARKED
        label, css = _LABELS[status]
        return AttendanceCellUI(
            date=d.strftime("%Y-%m-%d"),
            status=status.value,
            label=label,
            css_class=css,
            editable=is_editable(d, today=today, window=self._edit_window),
            custom_amount=str(record.custom_amount) if record and record.custom_amount is not None else None,
        )

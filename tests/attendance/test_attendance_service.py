from __future__ import annotations

import random
from datetime import date
from decimal import Decimal

import pytest

from src.khata.khata.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.khata.khata.attendance.service import AttendanceService, is_editable
from src.khata.khata.core.enums import DayStatus, EditWindow
from src.khata.khata.core.exceptions import NotFoundError, ValidationError
from src.khata.khata.employees.memory_employee_repository import InMemoryEmployeeRepository

TODAY = date(2025, 10, 15)  # Wednesday


def _setup(window: EditWindow = EditWindow.TODAY):
    employees = InMemoryEmployeeRepository()
    attendance = InMemoryAttendanceRepository()
    emp_id = employees.create(
        name="Ravi Kumar",
        designation="Mason",
        contact_number="9876543210",
        daily_wage=Decimal("500"),
    )
    return AttendanceService(attendance, employees, edit_window=window), attendance, emp_id


def test_first_action_creates_later_actions_overwrite():
    svc, repo, emp_id = _setup()

    first = svc.mark(employee_id=emp_id, work_date=TODAY, action="present", today=TODAY)
    second = svc.mark(employee_id=emp_id, work_date=TODAY, action="custom", amount=Decimal("200"), today=TODAY)

    assert first.attendance_id == second.attendance_id
    assert len(repo.list_all()) == 1
    assert second.status == DayStatus.CUSTOM
    assert second.custom_amount == Decimal("200.00")
    assert second.custom_type == "custom"


def test_at_most_one_record_per_employee_and_date_after_any_sequence():
    svc, repo, emp_id = _setup(EditWindow.CURRENT_WEEK)
    rnd = random.Random(7)
    days = [date(2025, 10, 13), date(2025, 10, 14), TODAY]
    actions = [
        ("present", {}),
        ("absent", {}),
        ("late", {}),
        ("overtime", {"hours": Decimal("2")}),
        ("half-day", {}),
        ("custom", {"amount": Decimal("100")}),
    ]

    for _ in range(60):
        day = rnd.choice(days)
        action, extra = rnd.choice(actions)
        try:
            svc.mark(employee_id=emp_id, work_date=day, action=action, today=TODAY, **extra)
        except ValidationError:
            # late on an unmarked day
            pass

    keys = [(r.employee_id, r.work_date) for r in repo.list_all()]
    assert len(keys) == len(set(keys))


def test_absent_then_present_drops_old_amount():
    svc, _, emp_id = _setup()
    svc.mark(employee_id=emp_id, work_date=TODAY, action="custom", amount=Decimal("300"), today=TODAY)
    rec = svc.mark(employee_id=emp_id, work_date=TODAY, action="absent", today=TODAY)
    assert rec.status == DayStatus.ABSENT
    assert rec.custom_amount is None

    rec = svc.mark(employee_id=emp_id, work_date=TODAY, action="present", today=TODAY)
    assert rec.status == DayStatus.PRESENT
    assert rec.custom_amount is None


def test_late_on_unmarked_day_is_rejected_and_nothing_is_written():
    svc, repo, emp_id = _setup()
    with pytest.raises(ValidationError):
        svc.mark(employee_id=emp_id, work_date=TODAY, action="late", today=TODAY)
    assert repo.list_all() == []
    assert svc.day_status(emp_id, TODAY) == DayStatus.NOT_MARKED


def test_edit_window_today_blocks_other_days():
    svc, repo, emp_id = _setup(EditWindow.TODAY)
    with pytest.raises(ValidationError):
        svc.mark(employee_id=emp_id, work_date=date(2025, 10, 14), action="present", today=TODAY)
    assert repo.list_all() == []


def test_edit_window_policies():
    monday, next_monday = date(2025, 10, 13), date(2025, 10, 20)
    assert is_editable(TODAY, today=TODAY, window=EditWindow.TODAY)
    assert not is_editable(monday, today=TODAY, window=EditWindow.TODAY)
    assert is_editable(monday, today=TODAY, window=EditWindow.CURRENT_WEEK)
    assert not is_editable(next_monday, today=TODAY, window=EditWindow.CURRENT_WEEK)
    assert is_editable(date(2024, 1, 1), today=TODAY, window=EditWindow.ANY)


def test_unknown_employee_is_rejected():
    svc, _, _ = _setup()
    with pytest.raises(NotFoundError):
        svc.mark(employee_id="999", work_date=TODAY, action="present", today=TODAY)


def test_week_grid_shows_seven_cells_with_editability():
    svc, _, emp_id = _setup()
    svc.mark(employee_id=emp_id, work_date=TODAY, action="overtime", hours=Decimal("4"), today=TODAY)

    rows = svc.week_grid(TODAY, today=TODAY)
    assert len(rows) == 1
    cells = rows[0]["cells"]
    assert len(cells) == 7
    assert cells[0]["date"] == "2025-10-13"
    assert cells[2]["status"] == DayStatus.OVERTIME.value
    assert cells[2]["custom_amount"] == "375.00"
    assert [c["editable"] for c in cells] == [False, False, True, False, False, False, False]
    assert cells[0]["status"] == DayStatus.NOT_MARKED.value

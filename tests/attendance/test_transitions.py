from datetime import date, datetime
from decimal import Decimal

import pytest

from src.khata.khata.attendance.factory import AttendanceTransitionFactory
from src.khata.khata.attendance.model import AttendanceRecord, DayMark
from src.khata.khata.attendance.transitions.extras import CustomTransition, HalfDayTransition
from src.khata.khata.attendance.transitions.overtime import OvertimeTransition, overtime_amount
from src.khata.khata.attendance.transitions.presence import (
    AbsentTransition,
    LateTransition,
    PresentTransition,
)
from src.khata.khata.core.enums import AttendanceAction, DayStatus
from src.khata.khata.core.exceptions import ValidationError
from src.khata.khata.employees.model import Employee


def _employee(wage="800") -> Employee:
    return Employee(
        employee_id="1",
        name="Ravi Kumar",
        designation="Mason",
        contact_number="9876543210",
        daily_wage=Decimal(wage),
        created_at=datetime(2025, 10, 1, 9, 0),
    )


def _record(status: DayStatus) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id="1",
        employee_id="1",
        work_date=date(2025, 10, 15),
        week_start=date(2025, 10, 13),
        status=status,
        created_at=datetime(2025, 10, 15, 8, 0),
    )


def test_factory_returns_transition_per_action():
    factory = AttendanceTransitionFactory()
    assert isinstance(factory.for_action(AttendanceAction.PRESENT), PresentTransition)
    assert isinstance(factory.for_action("absent"), AbsentTransition)
    assert isinstance(factory.for_action("late"), LateTransition)
    assert isinstance(factory.for_action("overtime"), OvertimeTransition)
    assert isinstance(factory.for_action("half-day"), HalfDayTransition)
    assert isinstance(factory.for_action("custom"), CustomTransition)


def test_factory_rejects_unknown_action():
    with pytest.raises(ValidationError):
        AttendanceTransitionFactory().for_action("holiday")


def test_present_and_absent_clear_extras():
    current = _record(DayStatus.CUSTOM)
    assert PresentTransition().apply(current=current, employee=_employee()) == DayMark(status=DayStatus.PRESENT)
    assert AbsentTransition().apply(current=current, employee=_employee()) == DayMark(status=DayStatus.ABSENT)


def test_late_requires_existing_record():
    with pytest.raises(ValidationError):
        LateTransition().apply(current=None, employee=_employee())

    mark = LateTransition().apply(current=_record(DayStatus.PRESENT), employee=_employee())
    assert mark.status == DayStatus.PRESENT_LATE


def test_overtime_scenario_rate_and_amount():
    mark = OvertimeTransition().apply(current=None, employee=_employee("800"), hours=Decimal("4"))
    assert mark.status == DayStatus.OVERTIME
    assert mark.ot_rate == Decimal("100.00")
    assert mark.ot_hours == Decimal("4")
    assert mark.custom_amount == Decimal("600.00")


def test_overtime_amount_rounds_to_paise():
    # 700 / 8 = 87.5 an hour; 1.5h * 87.5 * 1.5 = 196.875
    assert overtime_amount(Decimal("700"), Decimal("1.5")) == Decimal("196.88")


@pytest.mark.parametrize("hours", [None, Decimal("0"), Decimal("-2"), Decimal("0.004"), Decimal("24.01")])
def test_overtime_rejects_out_of_range_hours(hours):
    with pytest.raises(ValidationError):
        OvertimeTransition().apply(current=None, employee=_employee(), hours=hours)


def test_overtime_hours_are_kept_to_two_places():
    mark = OvertimeTransition().apply(current=None, employee=_employee("800"), hours=Decimal("1.333"))
    assert mark.ot_hours == Decimal("1.33")
    # 1.33h * 100 * 1.5
    assert mark.custom_amount == Decimal("199.50")

    full_day = OvertimeTransition().apply(current=None, employee=_employee("800"), hours=Decimal("24"))
    assert full_day.ot_hours == Decimal("24.00")


def test_half_day_amount_is_optional():
    assert HalfDayTransition().apply(current=None, employee=_employee()).custom_amount is None
    assert HalfDayTransition().apply(current=None, employee=_employee(), amount=Decimal("0")).custom_amount is None
    mark = HalfDayTransition().apply(current=None, employee=_employee(), amount=Decimal("150"))
    assert mark == DayMark(status=DayStatus.HALF_DAY, custom_amount=Decimal("150.00"))

    with pytest.raises(ValidationError):
        HalfDayTransition().apply(current=None, employee=_employee(), amount=Decimal("-1"))


def test_custom_requires_positive_amount():
    mark = CustomTransition().apply(current=None, employee=_employee(), amount=Decimal("250"))
    assert mark.status == DayStatus.CUSTOM
    assert mark.custom_amount == Decimal("250.00")

    for bad in (None, Decimal("0"), Decimal("-5")):
        with pytest.raises(ValidationError):
            CustomTransition().apply(current=None, employee=_employee(), amount=bad)


def test_day_mark_rejects_illegal_combinations():
    with pytest.raises(ValidationError):
        DayMark(status=DayStatus.NOT_MARKED)
    with pytest.raises(ValidationError):
        DayMark(status=DayStatus.ABSENT, custom_amount=Decimal("100"))
    with pytest.raises(ValidationError):
        DayMark(status=DayStatus.PRESENT, ot_hours=Decimal("2"))

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import week_start
from ..store.memory import InMemoryCollection
from ..store.subscriptions import Listener, Unsubscribe
from .model import AttendanceRecord, DayMark
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, collection: InMemoryCollection[AttendanceRecord] | None = None):
        self._items = collection or InMemoryCollection("attendance", id_field="attendance_id")

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._items.list_all()

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        return self._items.get_by_id(attendance_id)

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._items.find(lambda r: r.employee_id == str(employee_id) and r.work_date == work_date)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._items.subscribe(listener)

    def create(self, *, employee_id: str, work_date: date, mark: DayMark, note: Optional[str] = None) -> str:
        employee_id = str(employee_id)

        def build(current: Optional[AttendanceRecord]) -> AttendanceRecord:
            # same (employee_id, work_date) key keeps its id and created_at
            if current is not None:
                return replace(
                    current,
                    status=mark.status,
                    custom_amount=mark.custom_amount,
                    ot_hours=mark.ot_hours,
                    ot_rate=mark.ot_rate,
                    note=note,
                )
            return AttendanceRecord(
                attendance_id=self._items.next_id(),
                employee_id=employee_id,
                work_date=work_date,
                week_start=week_start(work_date),
                status=mark.status,
                created_at=self._items.now(),
                custom_amount=mark.custom_amount,
                ot_hours=mark.ot_hours,
                ot_rate=mark.ot_rate,
                note=note,
            )

        return self._items.upsert(lambda r: r.employee_id == employee_id and r.work_date == work_date, build)

    def update(self, *, attendance_id: str, mark: DayMark, note: Optional[str] = None) -> bool:
        return self._items.update(
            attendance_id,
            status=mark.status,
            custom_amount=mark.custom_amount,
            ot_hours=mark.ot_hours,
            ot_rate=mark.ot_rate,
            note=note,
        )

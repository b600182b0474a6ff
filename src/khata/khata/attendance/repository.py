from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..store.subscriptions import Listener, Unsubscribe
from .model import AttendanceRecord, DayMark


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Unsubscribe:
        raise NotImplementedError

    def create(self, *, employee_id: str, work_date: date, mark: DayMark, note: Optional[str] = None) -> str:
        raise NotImplementedError

    def update(self, *, attendance_id: str, mark: DayMark, note: Optional[str] = None) -> bool:
        raise NotImplementedError

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import week_start
from ..core.enums import DayStatus
from ..database.mysql_base import MySQLRepository, db_cursor, fetchall, fetchone, to_decimal
from .model import AttendanceRecord, DayMark
from .repository import AttendanceRepository

_COLUMNS = (
    "attendance_id, employee_id, work_date, week_start, status, "
    "custom_amount, ot_hours, ot_rate, note, created_at"
)


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=str(r["attendance_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        week_start=r["week_start"],
        status=DayStatus(r["status"]),
        created_at=r["created_at"],
        custom_amount=to_decimal(r.get("custom_amount")),
        ot_hours=to_decimal(r.get("ot_hours")),
        ot_rate=to_decimal(r.get("ot_rate")),
        note=r.get("note"),
    )


class MySQLAttendanceRepository(MySQLRepository[AttendanceRecord], AttendanceRepository):
    collection = "attendance"

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records ORDER BY created_at DESC, attendance_id DESC")
            return [_row_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (attendance_id,))
            row = fetchone(cur)
            return _row_to_record(row) if row else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            row = fetchone(cur)
            return _row_to_record(row) if row else None

    def create(self, *, employee_id: str, work_date: date, mark: DayMark, note: Optional[str] = None) -> str:
        # The unique key on (employee_id, work_date) turns a racing second insert into an update.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records
                    (employee_id, work_date, week_start, status, custom_amount, ot_hours, ot_rate, note)
                VALUES (%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    attendance_id=LAST_INSERT_ID(attendance_id),
                    status=VALUES(status),
                    custom_amount=VALUES(custom_amount),
                    ot_hours=VALUES(ot_hours),
                    ot_rate=VALUES(ot_rate),
                    note=VALUES(note)
                """,
                (
                    employee_id,
                    work_date,
                    week_start(work_date),
                    mark.status.value,
                    mark.custom_amount,
                    mark.ot_hours,
                    mark.ot_rate,
                    note,
                ),
            )
            new_id = str(cur.lastrowid)
        self._publish()
        return new_id

    def update(self, *, attendance_id: str, mark: DayMark, note: Optional[str] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET status=%s, custom_amount=%s, ot_hours=%s, ot_rate=%s, note=%s
                WHERE attendance_id=%s
                """,
                (
                    mark.status.value,
                    mark.custom_amount,
                    mark.ot_hours,
                    mark.ot_rate,
                    note,
                    attendance_id,
                ),
            )
            updated = cur.rowcount > 0
        if updated:
            self._publish()
        return updated

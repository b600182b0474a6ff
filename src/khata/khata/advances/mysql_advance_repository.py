from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.mysql_base import MySQLRepository, db_cursor, fetchall, fetchone, to_decimal
from .model import Advance
from .repository import AdvanceRepository

_COLUMNS = "advance_id, employee_id, employee_name, amount, advance_date, description, created_at"


def _row_to_advance(r: dict) -> Advance:
    return Advance(
        advance_id=str(r["advance_id"]),
        employee_id=str(r["employee_id"]),
        employee_name=r["employee_name"],
        amount=to_decimal(r["amount"]),
        advance_date=r["advance_date"],
        description=r.get("description") or "",
        created_at=r["created_at"],
    )


class MySQLAdvanceRepository(MySQLRepository[Advance], AdvanceRepository):
    collection = "advances"

    def list_all(self) -> Sequence[Advance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM advances ORDER BY created_at DESC, advance_id DESC")
            return [_row_to_advance(r) for r in fetchall(cur)]

    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM advances WHERE advance_id=%s", (advance_id,))
            row = fetchone(cur)
            return _row_to_advance(row) if row else None

    def create(
        self,
        *,
        employee_id: str,
        employee_name: str,
        amount: Decimal,
        advance_date: date,
        description: str,
    ) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO advances(employee_id, employee_name, amount, advance_date, description)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee_id, employee_name, amount, advance_date, description),
            )
            new_id = str(cur.lastrowid)
        self._publish()
        return new_id

    def delete_by_id(self, advance_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM advances WHERE advance_id=%s", (advance_id,))
            deleted = cur.rowcount > 0
        if deleted:
            self._publish()
        return deleted

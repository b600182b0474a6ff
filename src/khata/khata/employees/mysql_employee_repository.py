from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..database.mysql_base import MySQLRepository, db_cursor, fetchall, fetchone, to_decimal
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, designation, contact_number, daily_wage, photo, created_at"


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["employee_id"]),
        name=r["name"],
        designation=r["designation"],
        contact_number=r["contact_number"],
        daily_wage=to_decimal(r["daily_wage"]),
        created_at=r["created_at"],
        photo=r.get("photo"),
    )


class MySQLEmployeeRepository(MySQLRepository[Employee], EmployeeRepository):
    collection = "employees"

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at DESC, employee_id DESC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def create(
        self,
        *,
        name: str,
        designation: str,
        contact_number: str,
        daily_wage: Decimal,
        photo: Optional[str] = None,
    ) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, designation, contact_number, daily_wage, photo)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, designation, contact_number, daily_wage, photo),
            )
            new_id = str(cur.lastrowid)
        self._publish()
        return new_id

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            deleted = cur.rowcount > 0
        if deleted:
            self._publish()
        return deleted

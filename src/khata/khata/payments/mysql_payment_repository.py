from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.mysql_base import MySQLRepository, db_cursor, fetchall, fetchone, to_decimal
from .model import SalaryPayment
from .repository import SalaryPaymentRepository

_COLUMNS = "payment_id, employee_id, amount, payment_date, description, reverses_payment_id, created_at"


def _row_to_payment(r: dict) -> SalaryPayment:
    reverses = r.get("reverses_payment_id")
    return SalaryPayment(
        payment_id=str(r["payment_id"]),
        employee_id=str(r["employee_id"]),
        amount=to_decimal(r["amount"]),
        payment_date=r["payment_date"],
        description=r.get("description") or "",
        created_at=r["created_at"],
        reverses_payment_id=str(reverses) if reverses is not None else None,
    )


class MySQLSalaryPaymentRepository(MySQLRepository[SalaryPayment], SalaryPaymentRepository):
    collection = "salaryPayments"

    def list_all(self) -> Sequence[SalaryPayment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_payments ORDER BY created_at DESC, payment_id DESC")
            return [_row_to_payment(r) for r in fetchall(cur)]

    def get_by_id(self, payment_id: str) -> Optional[SalaryPayment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_payments WHERE payment_id=%s", (payment_id,))
            row = fetchone(cur)
            return _row_to_payment(row) if row else None

    def get_reversal_of(self, payment_id: str) -> Optional[SalaryPayment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_payments WHERE reverses_payment_id=%s", (payment_id,))
            row = fetchone(cur)
            return _row_to_payment(row) if row else None

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        payment_date: date,
        description: str,
        reverses_payment_id: Optional[str] = None,
    ) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_payments(employee_id, amount, payment_date, description, reverses_payment_id)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee_id, amount, payment_date, description, reverses_payment_id),
            )
            new_id = str(cur.lastrowid)
        self._publish()
        return new_id

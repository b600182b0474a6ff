from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import require_non_empty, require_positive_amount
from ..core.constants import MAX_PHOTO_BYTES
from ..core.exceptions import NotFoundError
from .model import Employee
from .photo import validate_photo
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee roster (admin)."""

    def __init__(self, employees: EmployeeRepository, *, max_photo_bytes: int = MAX_PHOTO_BYTES):
        self._employees = employees
        self._max_photo_bytes = int(max_photo_bytes)

    def create(
        self,
        *,
        name: str,
        designation: str,
        contact_number: str,
        daily_wage: Any,
        photo: Optional[str] = None,
    ) -> str:
        name = require_non_empty(name, "Name")
        designation = require_non_empty(designation, "Designation")
        contact_number = require_non_empty(contact_number, "Contact number")
        wage = require_positive_amount(daily_wage, "Daily wage")
        photo = validate_photo(photo, max_bytes=self._max_photo_bytes)

        employee_id = self._employees.create(
            name=name,
            designation=designation,
            contact_number=contact_number,
            daily_wage=wage,
            photo=photo,
        )
        logger.info("Created employee %s (%s)", employee_id, name)
        return employee_id

    def delete(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", employee_id)

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def search(self, term: str) -> list[Employee]:
        term = (term or "").strip().lower()
        employees = self._employees.list_all()
        if not term:
            return list(employees)
        return [
            e
            for e in employees
            if term in e.name.lower() or term in e.designation.lower() or term in e.contact_number
        ]

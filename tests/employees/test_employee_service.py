from __future__ import annotations

import base64
import io
from decimal import Decimal

import pytest
from PIL import Image

from src.khata.khata.core.exceptions import NotFoundError, ValidationError
from src.khata.khata.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.khata.khata.employees.photo import validate_photo
from src.khata.khata.employees.service import EmployeeService


def _png_data_url(size=(8, 8)) -> str:
    buf = io.BytesIO()
    Image.new("RGB", size, (200, 120, 40)).save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


@pytest.fixture()
def svc():
    return EmployeeService(InMemoryEmployeeRepository(), max_photo_bytes=4096)


def test_create_and_get(svc):
    employee_id = svc.create(
        name=" Ravi Kumar ",
        designation="Mason",
        contact_number="9876543210",
        daily_wage="650.50",
        photo=_png_data_url(),
    )
    employee = svc.get(employee_id)
    assert employee.name == "Ravi Kumar"
    assert employee.daily_wage == Decimal("650.50")
    assert employee.photo.startswith("data:image/png;base64,")
    assert employee.initials == "RK"


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", ""),
        ("designation", "   "),
        ("contact_number", ""),
        ("daily_wage", "0"),
        ("daily_wage", "-100"),
        ("daily_wage", "lots"),
    ],
)
def test_create_validation(svc, field, value):
    data = dict(name="A", designation="B", contact_number="1", daily_wage="500")
    data[field] = value
    with pytest.raises(ValidationError):
        svc.create(**data)
    assert list(svc.list_all()) == []


def test_delete(svc):
    employee_id = svc.create(name="A", designation="B", contact_number="1", daily_wage="500")
    svc.delete(employee_id)
    with pytest.raises(NotFoundError):
        svc.get(employee_id)
    with pytest.raises(NotFoundError):
        svc.delete(employee_id)


def test_search(svc):
    svc.create(name="Ravi", designation="Mason", contact_number="98765", daily_wage="500")
    svc.create(name="Sita", designation="Helper", contact_number="91234", daily_wage="400")
    assert [e.name for e in svc.search("mason")] == ["Ravi"]
    assert [e.name for e in svc.search("9123")] == ["Sita"]
    assert len(svc.search("")) == 2


def test_photo_validation():
    assert validate_photo(None, max_bytes=1024) is None
    assert validate_photo("", max_bytes=1024) is None

    with pytest.raises(ValidationError, match="data URL"):
        validate_photo("http://example.com/a.png", max_bytes=1024)
    with pytest.raises(ValidationError, match="base64"):
        validate_photo("data:image/png;base64,@@@", max_bytes=1024)
    with pytest.raises(ValidationError, match="readable image"):
        validate_photo("data:image/png;base64," + base64.b64encode(b"not a png").decode(), max_bytes=1024)
    with pytest.raises(ValidationError, match="KB or smaller"):
        validate_photo(_png_data_url((256, 256)), max_bytes=10)

from __future__ import annotations

from datetime import datetime

import pytest

from src.khata.khata.common import datetime_utils
from src.khata.khata.main import create_app

OWNER = {"email": "owner@example.com", "password": "owner-pass"}
NOW = datetime(2025, 10, 15, 10, 0)  # Wednesday


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(datetime_utils, "now_local", lambda: NOW)
    return create_app()


@pytest.fixture()
def admin(app):
    client = app.test_client()
    res = client.post("/login", json=OWNER)
    assert res.status_code == 200
    assert res.get_json()["user"]["role"] == "admin"
    return client


def _add_employee(client, name="Ravi Kumar", wage="500") -> str:
    res = client.post(
        "/employees",
        json={"name": name, "designation": "Mason", "contact_number": "9876543210", "daily_wage": wage},
    )
    assert res.status_code == 201
    return res.get_json()["employee_id"]


def test_reads_require_session(app):
    client = app.test_client()
    for path in ("/employees", "/attendance", "/dashboard", "/payments", "/me"):
        res = client.get(path)
        assert res.status_code == 401
        assert res.get_json()["success"] is False


def test_unknown_user_cannot_sign_in(app):
    res = app.test_client().post("/login", json={"email": "nobody@example.com", "password": "whatever"})
    assert res.status_code == 401
    assert "User not found" in res.get_json()["message"]


def test_weekly_flow_reaches_fully_paid_then_overpaid(admin):
    emp_id = _add_employee(admin)

    res = admin.post(f"/attendance/{emp_id}/2025-10-15", json={"action": "present"})
    assert res.status_code == 200
    assert res.get_json()["record"]["status"] == "PRESENT"

    # other days of the week are outside the default edit window
    res = admin.post(f"/attendance/{emp_id}/2025-10-14", json={"action": "present"})
    assert res.status_code == 400

    res = admin.post("/advances", json={"employee_id": emp_id, "amount": "200", "advance_date": "2025-10-15"})
    assert res.status_code == 201

    summary = admin.get(f"/payments?employee_id={emp_id}&week=2025-10-15").get_json()["summaries"][0]
    assert summary["total_wages"] == "500"
    assert summary["remaining_balance"] == "300"
    assert summary["balance_status"] == "DUE"

    res = admin.post("/payments", json={"employee_id": emp_id, "amount": "300", "payment_date": "2025-10-15"})
    assert res.status_code == 201
    first_payment = res.get_json()["payment_id"]
    summary = admin.get(f"/payments?employee_id={emp_id}").get_json()["summaries"][0]
    assert summary["balance_label"] == "Fully paid"

    admin.post("/payments", json={"employee_id": emp_id, "amount": "100", "payment_date": "2025-10-16"})
    summary = admin.get(f"/payments?employee_id={emp_id}").get_json()["summaries"][0]
    assert summary["remaining_balance"] == "-100"
    assert summary["balance_label"] == "Overpaid by ₹100.00"

    res = admin.post(f"/payments/{first_payment}/reverse", json={"reason": "duplicate"})
    assert res.status_code == 201
    body = admin.get(f"/payments?employee_id={emp_id}").get_json()
    assert body["summaries"][0]["remaining_balance"] == "200"
    assert sum(1 for p in body["payments"] if p["is_reversal"]) == 1

    dash = admin.get("/dashboard").get_json()["dashboard"]
    assert dash["present_today"] == 1
    assert dash["total_week_wages"] == "500"
    assert dash["total_week_advances"] == "200"


def test_attendance_grid_and_overtime(admin):
    emp_id = _add_employee(admin, wage="800")
    res = admin.post(f"/attendance/{emp_id}/2025-10-15", json={"action": "overtime", "hours": "4"})
    record = res.get_json()["record"]
    assert record["custom_amount"] == "600.00"
    assert record["custom_type"] == "overtime"

    body = admin.get("/attendance?week=2025-10-19").get_json()
    assert body["week_start"] == "2025-10-13"
    cells = body["rows"][0]["cells"]
    assert cells[2]["status"] == "OVERTIME"

    res = admin.post(f"/attendance/{emp_id}/2025-10-15", json={"action": "teleport"})
    assert res.status_code == 400


def test_viewer_can_read_but_not_write(app, admin):
    emp_id = _add_employee(admin)

    res = app.test_client().post(
        "/viewers",
        json={"email": "munshi@example.com", "password": "secret1", "confirm_password": "secret1", "access_code": "x"},
    )
    assert res.status_code == 400

    assert admin.put("/settings/access-code", json={"code": "site-42"}).status_code == 200
    res = app.test_client().post(
        "/viewers",
        json={
            "email": "munshi@example.com",
            "password": "secret1",
            "confirm_password": "secret1",
            "access_code": "site-42",
        },
    )
    assert res.status_code == 201

    viewer = app.test_client()
    assert viewer.post("/login", json={"email": "munshi@example.com", "password": "secret1"}).status_code == 200
    assert viewer.get("/me").get_json()["user"]["role"] == "viewer"
    assert viewer.get("/employees").status_code == 200
    assert viewer.get("/reports/monthly?month=2025-10").status_code == 200

    assert viewer.post("/employees", json={"name": "X"}).status_code == 403
    assert viewer.delete(f"/employees/{emp_id}").status_code == 403
    assert viewer.post(f"/attendance/{emp_id}/2025-10-15", json={"action": "present"}).status_code == 403
    assert viewer.post("/payments", json={"employee_id": emp_id, "amount": "1"}).status_code == 403
    assert viewer.put("/settings/access-code", json={"code": "mine"}).status_code == 403

    viewer.post("/logout")
    assert viewer.get("/employees").status_code == 401


def test_monthly_reports_and_downloads(admin):
    emp_id = _add_employee(admin, name="Mohan Lal", wage="800")
    admin.post(f"/attendance/{emp_id}/2025-10-15", json={"action": "custom", "amount": "250"})

    body = admin.get(f"/reports/monthly/{emp_id}?month=2025-10").get_json()
    assert body["payslip"]["total_earnings"] == "1050.00"
    assert body["report"]["custom"] == {"count": 1, "total": "250.00"}

    res = admin.get(f"/reports/monthly/{emp_id}/payslip.txt?month=2025-10")
    assert res.status_code == 200
    assert res.mimetype == "text/plain"
    assert "Mohan Lal" in res.get_data(as_text=True)
    assert "payslip_Mohan_Lal_2025-10.txt" in res.headers["Content-Disposition"]

    res = admin.get("/reports/monthly.csv?month=2025-10")
    assert res.mimetype == "text/csv"
    assert "Mohan Lal" in res.get_data().decode("utf-8-sig")

    assert admin.get("/reports/monthly/404?month=2025-10").status_code == 404
    assert admin.get("/reports/monthly?month=October").status_code == 400


def test_vehicles_and_fuel(admin):
    res = admin.post("/vehicles", json={"vehicle_number": "mh01", "vehicle_name": "JCB 3DX", "vehicle_type": "JCB"})
    vehicle_id = res.get_json()["vehicle_id"]
    admin.post(
        "/fuel-records",
        json={"vehicle_id": vehicle_id, "fuel_amount": "20", "fuel_cost": "1900", "fuel_date": "2025-10-02"},
    )

    summary = admin.get(f"/vehicles/{vehicle_id}/fuel-summary?month=2025-10").get_json()["summary"]
    assert summary["total_cost"] == "1900"
    assert summary["record_count"] == 1

    records = admin.get(f"/fuel-records?vehicle_id={vehicle_id}").get_json()["fuel_records"]
    assert admin.delete(f"/fuel-records/{records[0]['fuel_record_id']}").status_code == 200
    assert admin.delete(f"/fuel-records/{records[0]['fuel_record_id']}").status_code == 404
    assert admin.get("/vehicles/99/fuel-summary?month=2025-10").status_code == 404

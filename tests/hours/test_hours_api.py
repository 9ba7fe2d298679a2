from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest
from flask import Flask

from src.hours_bank.hours_bank.employees.controller import register as register_employees
from src.hours_bank.hours_bank.employees.service import EmployeeService
from src.hours_bank.hours_bank.hours.controller import register as register_hours
from src.hours_bank.hours_bank.hours.entry_service import HourEntryService
from src.hours_bank.hours_bank.hours.service import HoursBalanceService


class ExplodingHoursService:
    def get_dashboard(self, *args, **kwargs):
        raise RuntimeError("boom")


@pytest.fixture
def container(session_repo, employee_repo, tz, fixed_today):
    employee_service = EmployeeService(employee_repo)
    return SimpleNamespace(
        employee_service=employee_service,
        hours_service=HoursBalanceService(session_repo, tz=tz, clock=lambda: fixed_today),
        entry_service=HourEntryService(session_repo, employee_service),
    )


def make_client(container):
    app = Flask(__name__)
    app.config["TESTING"] = True
    register_employees(app, container)
    register_hours(app, container)
    return app.test_client()


@pytest.fixture
def client(container):
    return make_client(container)


def test_badge_checkin(client):
    res = client.post("/api/checkin/badge", json={"badge": "12-34 56"})

    assert res.status_code == 200
    assert res.get_json()["employee"]["full_name"] == "Ana Souza"
    assert res.get_json()["employee"]["initials"] == "AS"


def test_badge_checkin_errors(client):
    assert client.post("/api/checkin/badge", json={"badge": ""}).status_code == 400
    assert client.post("/api/checkin/badge", json={"badge": "999"}).status_code == 404


def test_employee_search(client):
    res = client.get("/api/employees?search=bruno")

    assert [e["id"] for e in res.get_json()["employees"]] == [2]


def test_create_entry_then_read_dashboard(client):
    res = client.post(
        "/api/work-sessions",
        json={"employee_id": 1, "work_date": "2025-03-11", "hours": 2, "hour_type": "negative"},
    )
    assert res.status_code == 201

    data = client.get("/api/employees/1/hours?view=week").get_json()

    assert data["summary"]["negative"] == 2
    assert data["summary"]["total_text"] == "-2h 00m"
    assert data["series"][2]["negative"] == 2
    assert len(data["series"]) == 7


def test_dashboard_defaults_to_30_day_view(client):
    data = client.get("/api/employees/1/hours").get_json()

    assert data["view"] == "month"
    assert data["today"] == "2025-03-12"
    assert len(data["series"]) == 30


def test_dashboard_accepts_explicit_today(client):
    data = client.get("/api/employees/1/hours?view=month&today=2025-01-31").get_json()

    assert data["series"][-1]["date"] == "2025-01-31"


@pytest.mark.parametrize("query", ["view=year", "today=31/01/2025"])
def test_dashboard_bad_query(client, query):
    res = client.get(f"/api/employees/1/hours?{query}")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_create_entry_validation(client):
    assert client.post("/api/work-sessions", json={"work_date": "2025-03-11", "hours": 1}).status_code == 400
    assert client.post("/api/work-sessions", json={"employee_id": 1, "work_date": "2025-03-11", "hours": 0}).status_code == 400
    assert client.post("/api/work-sessions", json={"employee_id": 99, "work_date": "2025-03-11", "hours": 1}).status_code == 404
    assert client.post("/api/work-sessions", data="nope", content_type="text/plain").status_code == 400


def test_update_list_and_delete_entry(client):
    sid = client.post(
        "/api/work-sessions", json={"employee_id": 2, "work_date": "2025-03-10", "hours": 1}
    ).get_json()["id"]

    update = {"work_date": "2025-03-11", "hours": 0.5, "hour_type": "negative"}
    assert client.put(f"/api/work-sessions/{sid}", json=update).status_code == 200
    assert client.put(f"/api/work-sessions/{sid}", json={"work_date": "2025-03-11", "hours": 0}).status_code == 400

    entries = client.get("/api/work-sessions?search=bruno").get_json()["entries"]
    assert entries[0]["id"] == sid
    assert entries[0]["hours"] == -0.5
    assert entries[0]["work_date"] == "2025-03-11"
    assert entries[0]["employee"]["full_name"] == "Bruno Alves"

    assert client.delete(f"/api/work-sessions/{sid}").status_code == 200
    assert client.delete(f"/api/work-sessions/{sid}").status_code == 404


def test_chart_svg(client):
    res = client.get("/api/employees/1/hours/chart.svg?view=week")

    assert res.status_code == 200
    assert res.mimetype == "image/svg+xml"
    assert res.get_data(as_text=True).startswith("<svg")


def test_export_xlsx(client):
    res = client.get("/api/employees/1/hours/export.xlsx")

    assert res.status_code == 200
    assert "attachment" in res.headers["Content-Disposition"]
    assert "banco_horas_1_2025-03-12.xlsx" in res.headers["Content-Disposition"]
    assert res.data[:2] == b"PK"


def test_unexpected_errors_become_500(container):
    container.hours_service = ExplodingHoursService()
    res = make_client(container).get("/api/employees/1/hours")

    assert res.status_code == 500
    assert res.get_json() == {"success": False, "message": "Erro interno do sistema"}

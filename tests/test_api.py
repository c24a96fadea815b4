import shutil
from datetime import timedelta
from pathlib import Path

import pytest

from attendance_dashboard.common.datetime_utils import today_local
from attendance_dashboard.main import create_app

REGISTRY = Path(__file__).resolve().parents[1] / "data" / "employees.json"


@pytest.fixture()
def client(tmp_path):
    registry = tmp_path / "employees.json"
    shutil.copy(REGISTRY, registry)
    app = create_app("config.testing", overrides={"EMPLOYEE_JSON_PATH": str(registry)})
    return app.test_client()


def _range(days_back=7, until=1):
    today = today_local()
    return {
        "startDate": (today - timedelta(days=days_back)).isoformat(),
        "endDate": (today - timedelta(days=until)).isoformat(),
    }


def test_attendance_details_requires_dates(client):
    resp = client.get("/api/attendance-details")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_attendance_details_rejects_bad_date(client):
    resp = client.get("/api/attendance-details", query_string={"startDate": "03/01/2025", "endDate": "2025-03-02"})

    assert resp.status_code == 400


def test_attendance_details_paginates(client):
    resp = client.get("/api/attendance-details", query_string={**_range(), "limit": 25, "page": 2})
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["pagination"]["totalCount"] == 70
    assert body["pagination"]["currentPage"] == 2
    assert body["pagination"]["totalPages"] == 3
    assert len(body["data"]) == 25
    assert set(body["data"][0]) == {"date", "id", "name", "department", "shift", "login", "logout", "hours", "status"}


def test_attendance_details_filters(client):
    params = {**_range(), "department": ["IT", "HR"], "shift": "night", "limit": 100}
    body = client.get("/api/attendance-details", query_string=params).get_json()

    assert body["data"] == []

    params["shift"] = "day"
    body = client.get("/api/attendance-details", query_string=params).get_json()
    assert body["pagination"]["totalCount"] == 4 * 7
    assert {r["department"] for r in body["data"]} == {"IT", "HR"}


def test_attendance_details_rejects_bad_limit(client):
    resp = client.get("/api/attendance-details", query_string={**_range(), "limit": "many"})

    assert resp.status_code == 400


def test_stats(client):
    body = client.get("/api/stats", query_string=_range()).get_json()

    assert body["totalEmployees"] == 10
    assert body["presentCount"] + body["absentCount"] == 10
    assert body["statusSummary"]["total"] == 70


def test_csv_export(client):
    params = _range()
    resp = client.get("/api/attendance-details.csv", query_string=params)

    assert resp.status_code == 200
    assert resp.content_type.startswith("text/csv")
    assert "attachment" in resp.headers["Content-Disposition"]
    assert len(resp.data.decode("utf-8-sig").strip().splitlines()) == 71


def test_employee_crud(client):
    listed = client.get("/api/details").get_json()
    assert listed["success"] is True
    assert [e["id"] for e in listed["data"]][:3] == ["1", "2", "3"]
    assert len(listed["data"]) == 10

    created = client.post(
        "/api/details",
        json={"first_name": "Rami", "last_name": "Odeh", "department": "IT", "shift": "night"},
    )
    assert created.status_code == 200
    assert created.get_json()["data"] == {
        "id": "11",
        "first_name": "Rami",
        "last_name": "Odeh",
        "department": "IT",
        "shift": "Night",
    }

    deleted = client.delete("/api/details/11")
    assert deleted.status_code == 200
    assert len(client.get("/api/details").get_json()["data"]) == 10


def test_add_employee_validation_error(client):
    resp = client.post("/api/details", json={"first_name": "R", "last_name": "Odeh", "department": "IT"})

    assert resp.status_code == 400
    assert "First name" in resp.get_json()["error"]


def test_delete_employee_errors(client):
    assert client.delete("/api/details/abc").status_code == 400
    assert client.delete("/api/details/-3").status_code == 400
    assert client.delete("/api/details/007").status_code == 400
    assert client.delete("/api/details/999").status_code == 404


def test_unseeded_mock_data_is_stable_across_requests(tmp_path):
    registry = tmp_path / "employees.json"
    shutil.copy(REGISTRY, registry)
    app = create_app("config.testing", overrides={"EMPLOYEE_JSON_PATH": str(registry), "MOCK_SEED": None})
    client = app.test_client()
    params = {**_range(7), "limit": 100}

    first = client.get("/api/attendance-details", query_string=params).get_json()
    second = client.get("/api/attendance-details", query_string=params).get_json()
    assert first == second

    page_one = client.get("/api/attendance-details", query_string={**params, "limit": 35}).get_json()
    page_two = client.get("/api/attendance-details", query_string={**params, "limit": 35, "page": 2}).get_json()
    assert page_one["data"] + page_two["data"] == first["data"]

    stats = client.get("/api/stats", query_string=_range(7)).get_json()
    absent = sum(1 for r in first["data"] if r["status"] == "Absent")
    assert stats["statusSummary"]["counts"]["Absent"] == absent

"""Tests for daily logs API: CRUD, total-hours rule, one log per date."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio(loop_scope="session")


def _log_body(day: str = "2026-02-25", **overrides) -> dict:
    body = {
        "date": day,
        "sleep_hours": 7.0,
        "work_hours": 8.0,
        "study_hours": 2.0,
        "entertainment_hours": 1.5,
        "energy_level": 6,
        "stress_level": 5,
        "notes": "Regular day",
    }
    body.update(overrides)
    return body


async def test_create_log(client: AsyncClient, auth_headers: dict):
    resp = await client.post("/api/v1/logs", json=_log_body(), headers=auth_headers)
    assert resp.status_code == 201
    data = resp.json()
    assert data["date"] == "2026-02-25"
    assert data["sleep_hours"] == 7.0
    assert data["stress_level"] == 5
    assert data["notes"] == "Regular day"
    assert isinstance(data["id"], str)


async def test_create_log_unauthorized(client: AsyncClient, clean_db):
    resp = await client.post("/api/v1/logs", json=_log_body())
    assert resp.status_code == 401


async def test_create_log_total_hours_over_24(client: AsyncClient, auth_headers: dict):
    resp = await client.post(
        "/api/v1/logs",
        json=_log_body(sleep_hours=10, work_hours=10, study_hours=3, entertainment_hours=2),
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Total hours cannot exceed 24 hours per day"


async def test_create_log_exactly_24_hours(client: AsyncClient, auth_headers: dict):
    resp = await client.post(
        "/api/v1/logs",
        json=_log_body(sleep_hours=8, work_hours=8, study_hours=4, entertainment_hours=4),
        headers=auth_headers,
    )
    assert resp.status_code == 201


@pytest.mark.parametrize("field,value", [
    ("stress_level", 11),
    ("stress_level", 0),
    ("energy_level", 0),
    ("sleep_hours", -1),
    ("work_hours", 25),
])
async def test_create_log_field_bounds(client: AsyncClient, auth_headers: dict, field, value):
    resp = await client.post("/api/v1/logs", json=_log_body(**{field: value}), headers=auth_headers)
    assert resp.status_code == 422


async def test_create_log_duplicate_date(client: AsyncClient, auth_headers: dict):
    first = await client.post("/api/v1/logs", json=_log_body(), headers=auth_headers)
    assert first.status_code == 201
    resp = await client.post("/api/v1/logs", json=_log_body(stress_level=9), headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "A log already exists for this date"


async def test_list_logs_newest_first(client: AsyncClient, auth_headers: dict):
    for day in ("2026-02-24", "2026-02-26", "2026-02-25"):
        r = await client.post("/api/v1/logs", json=_log_body(day), headers=auth_headers)
        assert r.status_code == 201
    resp = await client.get("/api/v1/logs", headers=auth_headers)
    assert resp.status_code == 200
    assert [item["date"] for item in resp.json()] == ["2026-02-26", "2026-02-25", "2026-02-24"]


async def test_get_log(client: AsyncClient, auth_headers: dict):
    create = await client.post("/api/v1/logs", json=_log_body(), headers=auth_headers)
    log_id = create.json()["id"]
    resp = await client.get(f"/api/v1/logs/{log_id}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == log_id


async def test_get_log_not_found(client: AsyncClient, auth_headers: dict):
    resp = await client.get("/api/v1/logs/9999", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Daily log not found with id: 9999"


async def test_update_log(client: AsyncClient, auth_headers: dict):
    create = await client.post("/api/v1/logs", json=_log_body(), headers=auth_headers)
    log_id = create.json()["id"]
    resp = await client.put(
        f"/api/v1/logs/{log_id}",
        json=_log_body(work_hours=10.0, stress_level=8, notes=None),
        headers=auth_headers,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["work_hours"] == 10.0
    assert data["stress_level"] == 8
    assert data["notes"] is None


async def test_update_log_to_taken_date(client: AsyncClient, auth_headers: dict):
    await client.post("/api/v1/logs", json=_log_body("2026-02-24"), headers=auth_headers)
    create = await client.post("/api/v1/logs", json=_log_body("2026-02-25"), headers=auth_headers)
    log_id = create.json()["id"]
    resp = await client.put(f"/api/v1/logs/{log_id}", json=_log_body("2026-02-24"), headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "A log already exists for this date"


async def test_update_log_total_hours_over_24(client: AsyncClient, auth_headers: dict):
    create = await client.post("/api/v1/logs", json=_log_body(), headers=auth_headers)
    log_id = create.json()["id"]
    resp = await client.put(
        f"/api/v1/logs/{log_id}",
        json=_log_body(sleep_hours=12, work_hours=12, study_hours=1),
        headers=auth_headers,
    )
    assert resp.status_code == 400


async def test_delete_log(client: AsyncClient, auth_headers: dict):
    create = await client.post("/api/v1/logs", json=_log_body(), headers=auth_headers)
    log_id = create.json()["id"]
    resp = await client.delete(f"/api/v1/logs/{log_id}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Log deleted successfully"}
    again = await client.get(f"/api/v1/logs/{log_id}", headers=auth_headers)
    assert again.status_code == 404

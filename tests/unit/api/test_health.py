# tests/unit/api/test_health.py
"""Health probes."""

import pytest


pytestmark = pytest.mark.unit

REQUEST_ID = "2f1c6b3e-8a4d-4c2e-9b1f-0d3e5a7c9b11"


async def test_liveness(async_client):
    response = await async_client.get("/health/live")

    assert response.status_code == 200
    assert response.json()["status"] == "alive"


async def test_ready_in_mock_mode(async_client):
    response = await async_client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["status"] == "ready"
    assert response.json()["components"][0]["details"] == {"mode": "mock"}


async def test_detailed_health_is_degraded_without_database_or_llm(async_client):
    response = await async_client.get("/health")

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "degraded"
    assert {c["name"]: c["status"] for c in body["components"]} == {
        "database": "degraded",
        "llm": "degraded",
    }


async def test_ready_with_live_database(async_client, live_db):
    response = await async_client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["components"][0]["status"] == "healthy"


async def test_responses_carry_request_id(async_client):
    response = await async_client.get("/health/live", headers={"X-Request-ID": REQUEST_ID})

    assert response.headers["x-request-id"] == REQUEST_ID

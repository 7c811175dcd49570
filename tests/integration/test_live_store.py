# tests/integration/test_live_store.py
"""
Routes against a live database (in-memory SQLite).

The `live_db` fixture binds the global DatabaseManager, switching the data
access layer from mock data to real queries.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import OperationalError

from idp_service import data
from idp_service.infrastructure.database.models import Service
from tests.factories import (
    AiSessionFactory,
    DeploymentFactory,
    PluginFactory,
    TemplateFactory,
)


pytestmark = pytest.mark.integration


async def test_empty_store_is_not_mock_data(async_client, live_db):
    assert data.has_store()

    assert (await async_client.get("/api/v1/plugins")).json() == []
    assert (await async_client.get("/api/v1/services")).json() == []
    assert (await async_client.get("/api/v1/deployments")).json() == []


class TestServices:
    async def test_created_service_is_listed(self, async_client, live_db, auth_headers):
        response = await async_client.post(
            "/api/v1/services",
            json={"name": "Ledger", "slug": "ledger", "team": "Finance", "tags": ["money"]},
            headers=auth_headers,
        )
        assert response.json() == {"success": True}

        services = (await async_client.get("/api/v1/services")).json()

        assert len(services) == 1
        assert services[0]["slug"] == "ledger"
        assert services[0]["status"] == "unknown"
        assert services[0]["tier"] == "medium"
        assert services[0]["tags"] == ["money"]

    async def test_duplicate_slug_conflicts(self, async_client, seeded_services, auth_headers):
        response = await async_client.post(
            "/api/v1/services",
            json={"name": "Another Checkout", "slug": "checkout"},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "DUPLICATE_RESOURCE"
        assert len((await async_client.get("/api/v1/services")).json()) == 2

    async def test_update_status(self, async_client, seeded_services, auth_headers):
        service_id = seeded_services[0].id

        await async_client.patch(
            f"/api/v1/services/{service_id}/status", json={"status": "degraded"}, headers=auth_headers
        )

        service = (await async_client.get(f"/api/v1/services/{service_id}")).json()
        assert service["status"] == "degraded"


class TestPlugins:
    async def test_toggle_and_configure(self, async_client, db_session, auth_headers):
        plugin = await PluginFactory.create_async(session=db_session, slug="cost-insights", enabled=False)

        await async_client.post(
            f"/api/v1/plugins/{plugin.id}/toggle", json={"enabled": True}, headers=auth_headers
        )
        await async_client.put(
            f"/api/v1/plugins/{plugin.id}/config",
            json={"config": {"currency": "EUR"}},
            headers=auth_headers,
        )

        stored = (await async_client.get("/api/v1/plugins/by-slug/cost-insights")).json()
        assert stored["enabled"] is True
        assert stored["config"] == {"currency": "EUR"}

    async def test_update_refreshes_updated_at(self, async_client, db_session, auth_headers):
        plugin = await PluginFactory.create_async(
            session=db_session,
            slug="scorecards",
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
            updated_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )

        response = await async_client.post(
            f"/api/v1/plugins/{plugin.id}/toggle", json={"enabled": False}, headers=auth_headers
        )

        assert response.status_code == 200
        stored = (await async_client.get("/api/v1/plugins/by-slug/scorecards")).json()
        assert stored["created_at"].startswith("2025-01-01T00:00:00")
        assert stored["updated_at"] > stored["created_at"]


class TestTimestamps:
    def test_defaults_are_utc(self):
        service = Service(name="Ledger", slug="ledger")

        assert service.created_at.tzinfo is timezone.utc
        assert service.updated_at.tzinfo is timezone.utc

    def test_columns_are_timezone_aware(self):
        for column in ("created_at", "updated_at"):
            assert Service.__table__.c[column].type.timezone is True


class TestDeployments:
    async def test_newest_first_and_limited(self, async_client, db_session):
        await DeploymentFactory.create_batch_async(session=db_session, size=5)

        deployments = (await async_client.get("/api/v1/deployments", params={"limit": 3})).json()

        timestamps = [d["created_at"] for d in deployments]
        assert len(deployments) == 3
        assert timestamps == sorted(timestamps, reverse=True)

    async def test_per_service_listing_caps_at_ten(self, async_client, db_session):
        await DeploymentFactory.create_batch_async(session=db_session, size=12, service_id=7)
        await DeploymentFactory.create_async(session=db_session, service_id=8)

        deployments = (await async_client.get("/api/v1/deployments/by-service/7")).json()

        assert len(deployments) == 10
        assert {d["service_id"] for d in deployments} == {7}

    async def test_create_fills_triggered_by_from_user(self, async_client, live_db, auth_headers, mock_user):
        await async_client.post(
            "/api/v1/deployments",
            json={"service_id": 1, "version": "v9.9.9", "environment": "staging"},
            headers=auth_headers,
        )

        [deployment] = (await async_client.get("/api/v1/deployments")).json()
        assert deployment["triggered_by"] == mock_user["name"]
        assert deployment["status"] == "pending"

    async def test_stats_and_dora(self, async_client, db_session):
        await DeploymentFactory.create_batch_async(session=db_session, size=7, duration=30)
        await DeploymentFactory.create_batch_async(session=db_session, size=3, status="failed", duration=30)

        stats = (await async_client.get("/api/v1/metrics/deployment-stats")).json()
        dora = (await async_client.get("/api/v1/metrics/dora")).json()

        assert stats == {"total": 10, "success": 7, "failed": 3, "avg_duration": 30.0}
        assert dora["change_failure_rate"]["value"] == 30
        assert dora["lead_time_for_changes"] == {"value": 30, "unit": "seconds", "rating": "Elite"}

    async def test_stats_on_empty_table(self, async_client, live_db):
        stats = (await async_client.get("/api/v1/metrics/deployment-stats")).json()
        dora = (await async_client.get("/api/v1/metrics/dora")).json()

        assert stats == {"total": 0, "success": 0, "failed": 0, "avg_duration": None}
        assert dora["deployment_frequency"] == {"value": 1, "unit": "per week", "rating": "High"}
        assert dora["lead_time_for_changes"]["value"] == 60


async def test_templates_by_popularity(async_client, db_session):
    for popularity in (5, 50, 20):
        await TemplateFactory.create_async(session=db_session, popularity=popularity)

    templates = (await async_client.get("/api/v1/templates")).json()

    assert [t["popularity"] for t in templates] == [50, 20, 5]


class TestAiSessions:
    async def test_chat_creates_session_titled_by_first_message(self, async_client, live_db, auth_headers, mock_user):
        question = "Why does my deployment keep failing? " * 5

        await async_client.post(
            "/api/v1/ai/chat",
            json={"messages": [{"role": "user", "content": question}]},
            headers=auth_headers,
        )

        [session] = (await async_client.get("/api/v1/ai/sessions", headers=auth_headers)).json()
        assert session["user_id"] == mock_user["id"]
        assert session["title"] == question[:100]
        assert session["messages"] == [
            {"role": "user", "content": question},
            {"role": "assistant", "content": "Here is what went wrong."},
        ]

    async def test_chat_appends_to_existing_session(self, async_client, db_session, auth_headers):
        existing = await AiSessionFactory.create_async(session=db_session)
        history = existing.messages + [{"role": "user", "content": "How do I fix it?"}]

        await async_client.post(
            "/api/v1/ai/chat",
            json={"messages": history, "session_id": existing.id},
            headers=auth_headers,
        )

        stored = (await async_client.get(f"/api/v1/ai/sessions/{existing.id}")).json()
        assert len(stored["messages"]) == 4
        assert stored["messages"][-1]["role"] == "assistant"
        assert stored["title"] == "Why did my build fail?"

    async def test_anonymous_chat_stores_nothing(self, async_client, live_db):
        await async_client.post("/api/v1/ai/chat", json={"messages": [{"role": "user", "content": "hi"}]})

        assert await data.user_sessions("test-user-id-123") == []

    async def test_sessions_scoped_to_user(self, async_client, db_session, auth_headers):
        await AiSessionFactory.create_async(session=db_session)
        await AiSessionFactory.create_async(session=db_session, user_id="someone-else")

        sessions = (await async_client.get("/api/v1/ai/sessions", headers=auth_headers)).json()

        assert len(sessions) == 1


class TestDatabaseOutage:
    @pytest.fixture
    def broken_db(self, live_db, monkeypatch):
        @asynccontextmanager
        async def refused():
            raise OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))
            yield

        monkeypatch.setattr(live_db, "session", refused)
        return live_db

    async def test_reads_answer_service_unavailable(self, async_client, broken_db):
        response = await async_client.get("/api/v1/services")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "DATABASE_ERROR"
        assert response.json()["error"]["context"] == {"reason": "ConnectionRefusedError"}

    async def test_readiness_fails(self, async_client, broken_db):
        response = await async_client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

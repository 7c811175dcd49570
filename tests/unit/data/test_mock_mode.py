# tests/unit/data/test_mock_mode.py
"""
Data access layer without a database.

Reads come from the built-in dataset; writes are skipped.
"""

import pytest

from idp_service import data
from idp_service.domain.models import DeploymentStatus


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def no_store():
    assert not data.has_store()


async def test_mock_record_counts():
    assert len(await data.list_plugins()) == 6
    assert len(await data.list_services()) == 8
    assert len(await data.recent_deployments(limit=100)) == 12
    assert len(await data.list_templates()) == 6


async def test_recent_deployments_respects_limit_and_order():
    deployments = await data.recent_deployments(limit=5)

    assert len(deployments) == 5
    timestamps = [d.created_at for d in deployments]
    assert timestamps == sorted(timestamps, reverse=True)


async def test_default_deployment_limit_returns_all_mock_rows():
    assert len(await data.recent_deployments()) == 12


async def test_templates_sorted_by_popularity():
    popularity = [t.popularity for t in await data.list_templates()]

    assert popularity == sorted(popularity, reverse=True)


async def test_lookup_by_slug():
    plugin = await data.get_plugin_by_slug("service-catalog")

    assert plugin is not None
    assert plugin.name == "Service Catalog"
    assert await data.get_plugin_by_slug("does-not-exist") is None


async def test_lookup_by_id():
    assert (await data.get_service(1)).slug == "auth-service"
    assert await data.get_service(999) is None
    assert (await data.get_deployment(3)).status == DeploymentStatus.DEPLOYING.value
    assert await data.get_deployment(999) is None


async def test_deployments_for_service_filters():
    deployments = await data.deployments_for_service(2)

    assert len(deployments) == 2
    assert {d.service_id for d in deployments} == {2}
    assert await data.deployments_for_service(999) == []


async def test_reads_return_fresh_copies():
    plugins = await data.list_plugins()
    plugins[0].name = "Mutated"

    assert (await data.list_plugins())[0].name == "Service Catalog"


async def test_deployment_stats_over_mock_data():
    stats = await data.deployment_stats()

    assert stats.total == 12
    assert stats.success == 8
    assert stats.failed == 2
    # The deploying row has no duration and is left out of the average
    assert stats.avg_duration == pytest.approx(665 / 11)


async def test_writes_are_noops():
    await data.toggle_plugin(6, True)
    await data.update_plugin_config(1, {"theme": "dark"})
    await data.create_service({"name": "New", "slug": "new"})
    await data.update_service_status(1, "down")
    await data.create_deployment({"service_id": 1})
    await data.update_session_messages(1, [])

    assert (await data.get_plugin_by_slug("cost-insights")).enabled is False
    assert (await data.get_service(1)).status == "healthy"
    assert len(await data.list_services()) == 8


async def test_ai_sessions_without_store():
    assert await data.user_sessions("someone") == []
    assert await data.get_session(1) is None
    assert await data.create_session({"user_id": "someone", "messages": []}) is None

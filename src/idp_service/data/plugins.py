"""Plugin registry accessors."""
from typing import Any, List, Optional

from idp_service.data import mock_data
from idp_service.data.store import has_store, serve_mock, skip_write, store_session
from idp_service.infrastructure.database.models import Plugin
from idp_service.infrastructure.database.repositories import PluginRepository


async def list_plugins() -> List[Plugin]:
    if not has_store():
        serve_mock("list_plugins")
        return mock_data.plugins()

    async with store_session() as session:
        return list(await PluginRepository(session).list_all())


async def get_plugin_by_slug(slug: str) -> Optional[Plugin]:
    """Plugin with the given slug, or None."""
    if not has_store():
        serve_mock("get_plugin_by_slug", slug=slug)
        return next((p for p in mock_data.plugins() if p.slug == slug), None)

    async with store_session() as session:
        return await PluginRepository(session).get_by_slug(slug)


async def toggle_plugin(plugin_id: int, enabled: bool) -> None:
    if not has_store():
        skip_write("toggle_plugin", plugin_id=plugin_id)
        return

    async with store_session() as session:
        await PluginRepository(session).set_enabled(plugin_id, enabled)


async def update_plugin_config(plugin_id: int, config: Any) -> None:
    if not has_store():
        skip_write("update_plugin_config", plugin_id=plugin_id)
        return

    async with store_session() as session:
        await PluginRepository(session).set_config(plugin_id, config)

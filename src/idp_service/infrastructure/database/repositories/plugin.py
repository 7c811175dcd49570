"""Plugin registry repository."""
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from idp_service.infrastructure.database.models.plugin import Plugin
from idp_service.infrastructure.database.repositories.base import BaseRepository


class PluginRepository(BaseRepository[Plugin]):
    """Repository for Plugin rows."""

    def __init__(self, session: AsyncSession):
        super().__init__(Plugin, session)

    async def list_all(self) -> Sequence[Plugin]:
        return await self.get_many(limit=None)

    async def get_by_slug(self, slug: str) -> Plugin | None:
        return await self.get_by("slug", slug)

    async def set_enabled(self, plugin_id: int, enabled: bool) -> Plugin | None:
        return await self.update(plugin_id, enabled=enabled)

    async def set_config(self, plugin_id: int, config: Any) -> Plugin | None:
        return await self.update(plugin_id, config=config)

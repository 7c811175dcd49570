"""Service catalog repository."""
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from idp_service.infrastructure.database.models.service import Service
from idp_service.infrastructure.database.repositories.base import BaseRepository


class ServiceRepository(BaseRepository[Service]):
    """Repository for catalogued services."""

    def __init__(self, session: AsyncSession):
        super().__init__(Service, session)

    async def list_all(self) -> Sequence[Service]:
        return await self.get_many(limit=None)

    async def set_status(self, service_id: int, status: str) -> Service | None:
        return await self.update(service_id, status=status)

"""Onboarding template repository."""
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from idp_service.infrastructure.database.models.template import OnboardingTemplate
from idp_service.infrastructure.database.repositories.base import BaseRepository


class TemplateRepository(BaseRepository[OnboardingTemplate]):
    """Repository for onboarding templates."""

    def __init__(self, session: AsyncSession):
        super().__init__(OnboardingTemplate, session)

    async def by_popularity(self) -> Sequence[OnboardingTemplate]:
        """All templates, most popular first."""
        return await self.get_many(limit=None, sort_by="popularity", order="desc")

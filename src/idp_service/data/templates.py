"""Onboarding template accessors."""
from typing import List

from idp_service.data import mock_data
from idp_service.data.store import has_store, serve_mock, store_session
from idp_service.infrastructure.database.models import OnboardingTemplate
from idp_service.infrastructure.database.repositories import TemplateRepository


async def list_templates() -> List[OnboardingTemplate]:
    """Templates ordered by popularity, most popular first."""
    if not has_store():
        serve_mock("list_templates")
        return sorted(mock_data.templates(), key=lambda t: t.popularity, reverse=True)

    async with store_session() as session:
        return list(await TemplateRepository(session).by_popularity())

# tests/factories/fixtures.py
"""
Factory fixtures for pytest integration.

Loaded via pytest_plugins in conftest.py.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories.models import ServiceFactory


@pytest.fixture
async def seeded_services(db_session: AsyncSession):
    """Two catalogued services in the live test database."""
    return [
        await ServiceFactory.create_async(session=db_session, slug="checkout", name="Checkout"),
        await ServiceFactory.create_async(session=db_session, slug="ledger", name="Ledger"),
    ]

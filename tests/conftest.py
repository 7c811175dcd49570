# tests/conftest.py
"""
Main pytest configuration and shared fixtures for all tests.

This module provides:
- Async test support (pytest-asyncio auto mode, set in pyproject.toml)
- Test settings: no database (mock mode), fixed signing key, quiet logs
- FastAPI app and async HTTP client over ASGITransport
- Live-store fixtures binding the global DatabaseManager to in-memory SQLite
- Authentication fixtures (session token provider, bearer headers)
- A fake LLM client
"""

import os

# Settings are read when the app module is imported; pin them first
os.environ.pop("DATABASE_URL", None)
os.environ.pop("LLM_API_KEY", None)
os.environ["ENVIRONMENT"] = "local"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-not-for-production"
os.environ["LOG_LEVEL"] = "40"
os.environ["LOG_FORMAT"] = "console"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from idp_service.agent.llm import LLMClient
from idp_service.api.app import create_app
from idp_service.api.dependencies import get_llm_client
from idp_service.auth import SessionTokenConfig, SessionTokenProvider, set_auth_provider
from idp_service.config.settings import Settings, get_settings
from idp_service.infrastructure.database import DatabaseManager, db


# ============================================================================
# Pytest Configuration
# ============================================================================

pytest_plugins = ["tests.factories.fixtures"]


# ============================================================================
# Settings and Configuration
# ============================================================================

@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Test settings: no DATABASE_URL, so the API runs against mock data
    unless a test opts into the live store.
    """
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.database_url is None
    return settings


# ============================================================================
# Authentication Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def auth_provider(test_settings: Settings) -> SessionTokenProvider:
    return SessionTokenProvider(
        SessionTokenConfig(
            secret_key=test_settings.secret_key.get_secret_value(),
            issuer=test_settings.token_issuer,
            audience=test_settings.token_audience,
        )
    )


@pytest.fixture
def mock_user() -> dict:
    """Identity used for authenticated requests."""
    return {
        "id": "test-user-id-123",
        "email": "test@example.com",
        "name": "Test User",
    }


@pytest.fixture
def auth_headers(auth_provider: SessionTokenProvider, mock_user: dict) -> dict:
    """
    Bearer headers for `mock_user`.

    Usage:
        async def test_endpoint(async_client, auth_headers):
            response = await async_client.post("/api/v1/services", json=..., headers=auth_headers)
    """
    token = auth_provider.issue_token(
        mock_user["id"],
        email=mock_user["email"],
        name=mock_user["name"],
    )
    return {"Authorization": f"Bearer {token}"}


# ============================================================================
# LLM
# ============================================================================

@pytest.fixture
def fake_llm() -> MagicMock:
    """
    Stand-in for the LLM client.

    Usage:
        async def test_chat(async_client, fake_llm):
            fake_llm.complete.return_value = "Check the image tag."
    """
    llm = MagicMock(spec=LLMClient)
    llm.complete = AsyncMock(return_value="Here is what went wrong.")
    llm.close = AsyncMock()
    return llm


# ============================================================================
# FastAPI Application and Client
# ============================================================================

@pytest.fixture
def app(test_settings: Settings, auth_provider: SessionTokenProvider, fake_llm: MagicMock) -> FastAPI:
    """
    Fresh app instance with the test auth provider and fake LLM.

    ASGITransport does not run the lifespan, so its startup work is done here.
    """
    application = create_app()
    set_auth_provider(auth_provider)
    application.dependency_overrides[get_llm_client] = lambda: fake_llm
    yield application
    application.dependency_overrides.clear()
    set_auth_provider(None)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client for testing FastAPI endpoints.

    Usage:
        async def test_endpoint(async_client):
            response = await async_client.get("/api/v1/plugins")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
async def live_db() -> AsyncGenerator[DatabaseManager, None]:
    """
    Bind the global DatabaseManager to a fresh in-memory SQLite database.

    StaticPool keeps a single connection so every session sees the same
    in-memory database. The manager is unbound afterwards, returning the
    data layer to mock mode.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    db.bind(engine)
    await db.create_tables()

    yield db

    db.unbind()
    await engine.dispose()


@pytest.fixture
async def db_session(live_db: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    """
    Session on the live test database, for seeding rows with factories.

    Usage:
        async def test_something(db_session):
            service = await ServiceFactory.create_async(session=db_session)
    """
    async with live_db.session() as session:
        yield session

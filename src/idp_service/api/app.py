from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from idp_service.config.settings import get_settings
from idp_service.api.dependencies import get_llm_client
from idp_service.api.middleware.cors import get_cors_middleware_config
from idp_service.api.middleware.request_id import RequestIDMiddleware
from idp_service.api.middleware.logging import RequestLoggingMiddleware
from idp_service.api.middleware.errors import register_error_handlers
from idp_service.api.routes import health, auth
from idp_service.api.v1.router import router as v1_router
from idp_service.auth import create_auth_provider, set_auth_provider
from idp_service.infrastructure.database import db
from idp_service.infrastructure.observability.logging import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    settings = get_settings()

    configure_logging()

    set_auth_provider(create_auth_provider(settings))

    # Without a database every read is served from the built-in mock dataset
    if settings.database_url and not db.is_connected:
        await db.connect(
            url=settings.database_url.get_secret_value(),
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
            echo_sql=settings.db_echo_sql,
        )
    elif not db.is_connected:
        logger.warning("DATABASE_URL not set, serving mock data and ignoring writes")

    logger.info(
        "Application started",
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    yield

    await get_llm_client().close()

    if db.is_connected:
        await db.disconnect()

    logger.info("Application stopped")


def create_app() -> FastAPI:
    """
    Application factory.

    Register new versioned routers in api/v1/router.py.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
# IDP Service API

Backend of the internal developer platform portal.

## Features

- **Service Catalog**: Services with ownership, tech stack, tier and health
- **Deployments**: Recent rollouts across environments, per-service history
- **Onboarding Templates**: Project templates ranked by popularity
- **Plugins**: Enable, disable and configure portal features
- **Metrics**: DORA indicators derived from deployments, SPACE snapshot
- **AI Assistant**: DevOps troubleshooting chat with saved sessions

Without a configured database the API serves a built-in mock dataset and
accepts but ignores writes.

## Authentication

Reads are public. Mutations require a bearer session token:

```
Authorization: Bearer <token>
```
        """,
        docs_url="/docs" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Health", "description": "Liveness, readiness and diagnostics."},
            {"name": "Authentication", "description": "Current user and logout."},
            {"name": "Plugins", "description": "Portal plugin registry."},
            {"name": "Services", "description": "Service catalog."},
            {"name": "Deployments", "description": "Deployment history."},
            {"name": "Templates", "description": "Onboarding templates."},
            {"name": "Metrics", "description": "DORA and SPACE engineering metrics."},
            {"name": "AI Assistant", "description": "DevOps chat assistant and saved sessions."},
        ],
    )

    # Middleware (added in reverse order of execution)
    # Request ID runs first so it's available to the request logger
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # CORS middleware with environment-aware configuration
    cors_config = get_cors_middleware_config(settings)
    app.add_middleware(CORSMiddleware, **cors_config)

    # Error handlers
    register_error_handlers(app)

    # ============================================================================
    # Routes
    # ============================================================================

    # Health routes (no versioning - kept at root level)
    app.include_router(health.router, tags=["Health"])

    # Authentication routes (no versioning - kept at root level)
    app.include_router(auth.router, tags=["Authentication"])

    # API v1 routes
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()

from urllib.parse import urlparse

from idp_service.config.settings import Settings
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

# Dev servers of the portal UI
DEFAULT_DEV_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def get_cors_middleware_config(settings: Settings) -> dict:
    """
    Get CORS middleware configuration based on environment settings.

    Raises:
        ValueError: If origin URLs have invalid format
    """
    allowed_origins = settings.cors_origins.copy() if settings.cors_origins else []

    # The portal UI runs on a different port during local development
    if settings.environment in ["local", "dev"] and not allowed_origins:
        allowed_origins = list(DEFAULT_DEV_ORIGINS)
        logger.info(
            "CORS: using default localhost origins",
            environment=settings.environment,
            origins=allowed_origins,
        )

    for origin in allowed_origins:
        if origin == "*":
            if settings.is_production:
                logger.warning("CORS: wildcard origin configured in production")
            continue

        parsed = urlparse(origin)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(
                f"Invalid origin URL format: {origin}. "
                "Origins must include scheme and domain (e.g., 'http://localhost:3000')"
            )

    if settings.environment in ["staging", "prod"] and not allowed_origins:
        logger.warning(
            "CORS: no origins configured, cross-origin requests will be blocked",
            environment=settings.environment,
        )

    logger.info(
        "CORS configured",
        origins=allowed_origins,
        allow_credentials=settings.cors_allow_credentials,
        methods=settings.cors_allow_methods,
        max_age=settings.cors_max_age,
    )

    return {
        "allow_origins": allowed_origins,
        "allow_credentials": settings.cors_allow_credentials,
        "allow_methods": settings.cors_allow_methods,
        "allow_headers": settings.cors_allow_headers,
        "max_age": settings.cors_max_age,
    }

"""
Authentication providers.

`create_auth_provider` builds the provider from application settings. When
no SECRET_KEY is configured outside production an ephemeral key is
generated, so tokens stop validating after a restart.
"""

import secrets

from idp_service.config.settings import Settings
from idp_service.infrastructure.observability.logging import get_logger

from ..exceptions import ProviderConfigError
from ..schemas import SessionTokenConfig
from .base import IAuthProvider
from .session_token import SessionTokenProvider

logger = get_logger(__name__)


def create_auth_provider(settings: Settings) -> SessionTokenProvider:
    """
    Build the session token provider.

    Raises:
        ProviderConfigError: If SECRET_KEY is missing in production
    """
    if settings.secret_key is not None:
        secret_key = settings.secret_key.get_secret_value()
    elif settings.is_production:
        raise ProviderConfigError(
            "SECRET_KEY is required in production",
            provider="session_token",
            missing_fields=["secret_key"],
        )
    else:
        logger.warning("SECRET_KEY not set, using an ephemeral signing key")
        secret_key = secrets.token_urlsafe(32)

    return SessionTokenProvider(
        SessionTokenConfig(
            secret_key=secret_key,
            algorithm=settings.token_algorithm,
            issuer=settings.token_issuer,
            audience=settings.token_audience,
            expiry_minutes=settings.token_expiry_minutes,
        )
    )


__all__ = [
    "IAuthProvider",
    "SessionTokenProvider",
    "create_auth_provider",
]

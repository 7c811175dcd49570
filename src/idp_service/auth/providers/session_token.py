"""
Session token provider.

Verifies the HS256 JWTs the portal login flow hands to the browser. The
same key signs tokens in `issue_token`, which local development and the
test-suite use in place of the login flow.
"""

import time
from typing import Any, Optional

import jwt

from idp_service.infrastructure.observability.logging import get_logger

from ..exceptions import (
    AuthenticationError,
    InvalidTokenError,
    ProviderConfigError,
    TokenExpiredError,
)
from ..schemas import AuthProvider, SessionTokenConfig, TokenPayload, UserInfo
from .base import IAuthProvider

logger = get_logger(__name__)

PROVIDER_NAME = AuthProvider.SESSION_TOKEN.value


class SessionTokenProvider(IAuthProvider):
    """
    Shared-secret JWT provider.

    Example:
        >>> provider = SessionTokenProvider(SessionTokenConfig(secret_key="..."))
        >>> token = provider.issue_token("user-123", email="dev@example.com")
        >>> provider.get_user_info(token).id
        'user-123'
    """

    def __init__(self, config: SessionTokenConfig) -> None:
        self.config = config
        self.validate_configuration()

    def validate_configuration(self) -> None:
        if not self.config.algorithm.startswith("HS"):
            raise ProviderConfigError(
                "Session tokens must use an HMAC algorithm",
                provider=PROVIDER_NAME,
            )

    def get_provider_name(self) -> str:
        return PROVIDER_NAME

    def issue_token(
        self,
        subject: str,
        *,
        email: Optional[str] = None,
        name: Optional[str] = None,
        roles: Optional[list[str]] = None,
        expires_in: Optional[int] = None,
    ) -> str:
        """Sign a token for `subject`; `expires_in` is in seconds."""
        now = int(time.time())
        lifetime = expires_in if expires_in is not None else self.config.expiry_minutes * 60
        claims: dict[str, Any] = {
            "sub": subject,
            "iat": now,
            "exp": now + lifetime,
            "iss": self.config.issuer,
            "aud": self.config.audience,
            "roles": roles or [],
        }
        if email:
            claims["email"] = email
        if name:
            claims["name"] = name

        return jwt.encode(claims, self.config.secret_key, algorithm=self.config.algorithm)

    def verify_token(self, token: str) -> TokenPayload:
        try:
            claims = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                audience=self.config.audience,
                issuer=self.config.issuer,
                options={"require": ["sub", "exp", "iat", "iss", "aud"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError(provider=PROVIDER_NAME, original_error=e)
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected session token", reason=str(e))
            raise InvalidTokenError(
                provider=PROVIDER_NAME,
                reason=str(e),
                original_error=e,
            )

        try:
            return TokenPayload(**claims)
        except ValueError as e:
            raise AuthenticationError(
                "Token claims are malformed",
                provider=PROVIDER_NAME,
                original_error=e,
            )

    def get_user_info(self, token: str) -> UserInfo:
        payload = self.verify_token(token)
        return UserInfo(
            id=payload.sub,
            email=payload.email,
            name=payload.name,
            roles=payload.roles,
            provider=AuthProvider.SESSION_TOKEN,
            metadata={"expires_in": payload.expires_in},
        )

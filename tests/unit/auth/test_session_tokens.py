# tests/unit/auth/test_session_tokens.py
"""Session token provider and auth routes."""

import jwt
import pytest

from idp_service.auth import (
    AuthProvider,
    InvalidTokenError,
    ProviderConfigError,
    SessionTokenConfig,
    SessionTokenProvider,
    TokenExpiredError,
    create_auth_provider,
)
from idp_service.config.settings import Settings


pytestmark = pytest.mark.unit


class TestSessionTokenProvider:
    def test_issue_and_verify(self, auth_provider):
        token = auth_provider.issue_token("user-1", email="a@example.com", name="Ada", roles=["admin"])

        user = auth_provider.get_user_info(token)

        assert user.id == "user-1"
        assert user.email == "a@example.com"
        assert user.name == "Ada"
        assert user.has_role("admin")
        assert user.provider == AuthProvider.SESSION_TOKEN

    def test_expired_token(self, auth_provider):
        token = auth_provider.issue_token("user-1", expires_in=-10)

        with pytest.raises(TokenExpiredError):
            auth_provider.verify_token(token)

    def test_wrong_audience(self, auth_provider, test_settings):
        other = SessionTokenProvider(
            SessionTokenConfig(
                secret_key=test_settings.secret_key.get_secret_value(),
                issuer=test_settings.token_issuer,
                audience="someone-else",
            )
        )

        with pytest.raises(InvalidTokenError):
            auth_provider.verify_token(other.issue_token("user-1"))

    def test_wrong_signing_key(self, auth_provider):
        other = SessionTokenProvider(SessionTokenConfig(secret_key="a-completely-different-key"))

        with pytest.raises(InvalidTokenError):
            auth_provider.verify_token(other.issue_token("user-1"))

    def test_missing_subject(self, auth_provider, test_settings):
        token = jwt.encode(
            {"exp": 9999999999, "iat": 0, "iss": test_settings.token_issuer, "aud": test_settings.token_audience},
            test_settings.secret_key.get_secret_value(),
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            auth_provider.verify_token(token)

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError):
            SessionTokenConfig(secret_key="short")


class TestCreateAuthProvider:
    def test_uses_configured_secret(self, test_settings):
        provider = create_auth_provider(test_settings)

        assert provider.config.secret_key == test_settings.secret_key.get_secret_value()

    def test_ephemeral_key_outside_production(self):
        provider = create_auth_provider(Settings(environment="local", secret_key=None))

        assert len(provider.config.secret_key) >= 32

    def test_production_requires_secret(self):
        with pytest.raises(ProviderConfigError):
            create_auth_provider(Settings(environment="prod", secret_key=None))


class TestAuthRoutes:
    async def test_me_anonymous(self, async_client):
        response = await async_client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() is None

    async def test_me_with_invalid_token_is_anonymous(self, async_client):
        response = await async_client.get("/auth/me", headers={"Authorization": "Bearer garbage"})

        assert response.json() is None

    async def test_me_signed_in(self, async_client, auth_headers, mock_user):
        response = await async_client.get("/auth/me", headers=auth_headers)

        body = response.json()
        assert body["id"] == mock_user["id"]
        assert body["email"] == mock_user["email"]
        assert body["name"] == mock_user["name"]

    async def test_logout(self, async_client, auth_headers):
        response = await async_client.post("/auth/logout", headers=auth_headers)

        assert response.json() == {"success": True}

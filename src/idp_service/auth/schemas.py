"""
Session token claims and the authenticated user.

Tokens are HS256 JWTs issued by the portal's login flow. The `sub` claim is
the user id and owns AI chat sessions; there is no users table.
"""

import time
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthProvider(str, Enum):
    SESSION_TOKEN = "session_token"


class TokenPayload(BaseModel):
    """Verified claims of a session token."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="allow")

    sub: str = Field(..., min_length=1, description="User id")
    exp: int = Field(..., gt=0)
    iat: int = Field(..., gt=0)
    iss: str = Field(..., min_length=1)
    aud: str | list[str]
    email: Optional[str] = None
    name: Optional[str] = None
    roles: list[str] = Field(default_factory=list)

    @property
    def expires_in(self) -> int:
        """Seconds left before `exp` (negative once expired)."""
        return int(self.exp - time.time())


class UserInfo(BaseModel):
    """
    Caller identity handed to route handlers.

    Returned as-is by `GET /auth/me`.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(..., min_length=1, description="Token subject")
    email: Optional[str] = None
    name: Optional[str] = Field(None, description="Display name, used as deployment trigger")
    roles: list[str] = Field(default_factory=list)
    provider: AuthProvider
    metadata: dict[str, Any] = Field(default_factory=dict)

    def has_role(self, role: str) -> bool:
        return role in self.roles


class SessionTokenConfig(BaseModel):
    """Signing and validation parameters for SessionTokenProvider."""

    model_config = ConfigDict(str_strip_whitespace=True)

    secret_key: str = Field(..., min_length=16, description="HMAC signing key")
    algorithm: str = "HS256"
    issuer: str = "idp-service"
    audience: str = "idp-portal"
    expiry_minutes: int = Field(60 * 24 * 7, gt=0)

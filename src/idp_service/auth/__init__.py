"""
Authentication for the IDP service.

Bearer session tokens are verified by a pluggable IAuthProvider; routes use
the `get_current_user` and `optional_auth` dependencies.
"""

from .schemas import AuthProvider, SessionTokenConfig, TokenPayload, UserInfo
from .exceptions import (
    AuthenticationError,
    InvalidTokenError,
    ProviderConfigError,
    TokenExpiredError,
)
from .providers import IAuthProvider, SessionTokenProvider, create_auth_provider
from .dependencies import (
    get_auth_provider,
    get_current_user,
    optional_auth,
    set_auth_provider,
)

__all__ = [
    "AuthProvider",
    "SessionTokenConfig",
    "TokenPayload",
    "UserInfo",
    "AuthenticationError",
    "InvalidTokenError",
    "ProviderConfigError",
    "TokenExpiredError",
    "IAuthProvider",
    "SessionTokenProvider",
    "create_auth_provider",
    "get_auth_provider",
    "get_current_user",
    "optional_auth",
    "set_auth_provider",
]

"""
Bearer token dependencies.

    get_current_user  every mutation; 401 with `WWW-Authenticate: Bearer`
                      when the token is missing, expired or invalid
    optional_auth     reads that personalise (chat, sessions, /auth/me);
                      a bad token is treated as no token

The resolved user is stored on `request.state.user` for the access log and
error handlers.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .exceptions import AuthenticationError, InvalidTokenError, TokenExpiredError
from .providers import IAuthProvider
from .schemas import UserInfo


bearer_scheme = HTTPBearer(auto_error=False)

# Installed by the application lifespan
_auth_provider: Optional[IAuthProvider] = None


def set_auth_provider(provider: Optional[IAuthProvider]) -> None:
    global _auth_provider
    _auth_provider = provider


def get_auth_provider() -> IAuthProvider:
    if _auth_provider is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication provider not configured",
        )
    return _auth_provider


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    provider: IAuthProvider = Depends(get_auth_provider),
) -> UserInfo:
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    try:
        user = provider.get_user_info(credentials.credentials)
    except TokenExpiredError:
        raise _unauthorized("Token has expired")
    except InvalidTokenError:
        raise _unauthorized("Invalid token")
    except AuthenticationError as e:
        raise _unauthorized(e.message)

    request.state.user = user
    return user


async def optional_auth(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    provider: IAuthProvider = Depends(get_auth_provider),
) -> Optional[UserInfo]:
    if credentials is None or not credentials.credentials:
        return None

    try:
        user = provider.get_user_info(credentials.credentials)
    except AuthenticationError:
        return None

    request.state.user = user
    return user

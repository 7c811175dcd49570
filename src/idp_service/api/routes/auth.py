"""
Authentication routes.

Mounted at the root (not versioned):
    - GET /auth/me - Current user, or null for anonymous callers
    - POST /auth/logout - Acknowledge logout

Tokens are bearer tokens held by the client, so logout has nothing to revoke
server-side; the client discards its token.
"""

from typing import Optional

from fastapi import APIRouter

from idp_service.api.dependencies import OptionalUser
from idp_service.api.schemas.portal import SuccessResponse
from idp_service.auth.schemas import UserInfo
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/auth/me",
    response_model=Optional[UserInfo],
    summary="Get current user information",
    description="Returns `null` when the request carries no valid bearer token.",
)
async def get_me(user: OptionalUser):
    return user


@router.post("/auth/logout", response_model=SuccessResponse, summary="Log out")
async def logout(user: OptionalUser):
    if user:
        logger.info("User logged out", user_id=user.id)
    return SuccessResponse()

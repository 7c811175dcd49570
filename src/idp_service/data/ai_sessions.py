"""
AI assistant session accessors.

There is no mock transcript store: without a database users simply have no
saved sessions and new transcripts are not kept.
"""
from typing import Any, Dict, List, Optional

from idp_service.data.store import has_store, serve_mock, skip_write, store_session
from idp_service.infrastructure.database.models import AiSession
from idp_service.infrastructure.database.repositories import AiSessionRepository
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

USER_SESSIONS_LIMIT = 20


async def user_sessions(user_id: str) -> List[AiSession]:
    """Most recently updated sessions of a user."""
    if not has_store():
        serve_mock("user_sessions", user_id=user_id)
        return []

    async with store_session() as session:
        return list(await AiSessionRepository(session).for_user(user_id, USER_SESSIONS_LIMIT))


async def get_session(session_id: int) -> Optional[AiSession]:
    if not has_store():
        serve_mock("get_session", session_id=session_id)
        return None

    async with store_session() as session:
        return await AiSessionRepository(session).get(session_id)


async def create_session(data: Dict[str, Any]) -> Optional[int]:
    """Insert a session and return its id (None when nothing was stored)."""
    if not has_store():
        skip_write("create_session", user_id=data.get("user_id"))
        return None

    async with store_session() as session:
        created = await AiSessionRepository(session).create(AiSession(**data))

    logger.info("AI session created", session_id=created.id, user_id=created.user_id)
    return created.id


async def update_session_messages(
    session_id: int,
    messages: List[Dict[str, Any]],
    title: Optional[str] = None,
) -> None:
    if not has_store():
        skip_write("update_session_messages", session_id=session_id)
        return

    async with store_session() as session:
        await AiSessionRepository(session).replace_messages(session_id, messages, title)

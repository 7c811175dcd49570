"""
AI session repository.

Stores chat transcripts for the assistant. Transcripts are replaced
wholesale on every turn; the caller sends the full history each time.
"""
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from idp_service.infrastructure.database.models.ai_session import AiSession
from idp_service.infrastructure.database.repositories.base import BaseRepository


class AiSessionRepository(BaseRepository[AiSession]):
    """Repository for AiSession rows."""

    def __init__(self, session: AsyncSession):
        super().__init__(AiSession, session)

    async def for_user(self, user_id: str, limit: int = 20) -> Sequence[AiSession]:
        """Most recently updated sessions of a user."""
        return await self.get_many(
            limit=limit,
            sort_by="updated_at",
            order="desc",
            user_id=user_id,
        )

    async def replace_messages(
        self,
        session_id: int,
        messages: List[Dict[str, Any]],
        title: Optional[str] = None,
    ) -> AiSession | None:
        values: Dict[str, Any] = {"messages": messages}
        if title:
            values["title"] = title
        return await self.update(session_id, **values)

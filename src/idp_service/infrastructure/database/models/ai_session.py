"""
SQLModel table for AI assistant chat transcripts.

A session accumulates an ordered list of chat turns for one user. Each turn
is stored as {"role": "user" | "assistant", "content": str}.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, Index
from sqlmodel import Field

from idp_service.infrastructure.database.base_model import BaseModel, JSONType


class AiSession(BaseModel, table=True):
    """
    Chat transcript owned by a user.

    Attributes:
        user_id: Subject identifier of the owning user
        title: First user message, truncated
        messages: Chat turns in chronological order
    """

    __tablename__ = "ai_sessions"

    user_id: str = Field(max_length=128, nullable=False, index=True)
    title: Optional[str] = Field(default=None, max_length=256)
    messages: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSONType, nullable=False),
    )

    __table_args__ = (
        Index("ix_ai_sessions_user_id_updated_at", "user_id", "updated_at"),
    )

    @property
    def total_messages(self) -> int:
        return len(self.messages or [])

    def __repr__(self) -> str:
        return (
            f"AiSession(id={self.id}, user_id={self.user_id!r}, "
            f"title={self.title!r}, messages={self.total_messages})"
        )

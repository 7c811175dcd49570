"""SQLModel table for the service catalog."""
from typing import List, Optional

from sqlalchemy import Column, Text
from sqlmodel import Field

from idp_service.domain.models import ServiceStatus, ServiceTier
from idp_service.infrastructure.database.base_model import BaseModel, JSONType


class Service(BaseModel, table=True):
    """
    Catalogued service.

    Attributes:
        name: Display name
        slug: Unique identifier
        description: What the service does
        owner: Person accountable for the service
        team: Owning team
        language: Primary implementation language
        framework: Primary framework
        repo_url: Source repository URL
        status: healthy, degraded, down or unknown (see ServiceStatus)
        tier: critical, high, medium or low (see ServiceTier)
        tags: Free-form labels
    """

    __tablename__ = "services"

    name: str = Field(max_length=128, nullable=False)
    slug: str = Field(max_length=128, unique=True, index=True, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    owner: Optional[str] = Field(default=None, max_length=128)
    team: Optional[str] = Field(default=None, max_length=128)
    language: Optional[str] = Field(default=None, max_length=64)
    framework: Optional[str] = Field(default=None, max_length=64)
    repo_url: Optional[str] = Field(default=None, max_length=512)
    status: str = Field(default=ServiceStatus.UNKNOWN.value, max_length=16, index=True, nullable=False)
    tier: str = Field(default=ServiceTier.MEDIUM.value, max_length=16, nullable=False)
    tags: Optional[List[str]] = Field(default=None, sa_column=Column(JSONType, nullable=True))

    def __repr__(self) -> str:
        return f"Service(id={self.id}, slug={self.slug!r}, status={self.status!r})"

"""SQLModel table for deployments."""
from typing import Optional

from sqlalchemy import Column, Index, Text
from sqlmodel import Field

from idp_service.domain.models import DeploymentEnvironment, DeploymentStatus
from idp_service.infrastructure.database.base_model import BaseModel


class Deployment(BaseModel, table=True):
    """
    A single rollout of a service version to an environment.

    service_id references services.id but is not enforced as a foreign key;
    deployment records may outlive the catalog entry.

    Attributes:
        service_id: Deployed service
        version: Released version label
        environment: production, staging or development
        status: pending, building, deploying, success, failed or rolled_back
        triggered_by: Person or automation that started the rollout
        commit_hash: Source commit
        commit_message: Source commit subject
        duration: Wall time in seconds, None while running
        logs: Captured build/deploy output
    """

    __tablename__ = "deployments"

    service_id: int = Field(nullable=False, index=True)
    version: Optional[str] = Field(default=None, max_length=64)
    environment: str = Field(default=DeploymentEnvironment.DEVELOPMENT.value, max_length=16, nullable=False)
    status: str = Field(default=DeploymentStatus.PENDING.value, max_length=16, nullable=False)
    triggered_by: Optional[str] = Field(default=None, max_length=128)
    commit_hash: Optional[str] = Field(default=None, max_length=64)
    commit_message: Optional[str] = Field(default=None, sa_column=Column(Text))
    duration: Optional[int] = Field(default=None)
    logs: Optional[str] = Field(default=None, sa_column=Column(Text))

    __table_args__ = (
        Index("ix_deployments_service_id_created_at", "service_id", "created_at"),
        Index("ix_deployments_created_at", "created_at"),
    )

"""
Request and response schemas for the portal API.

Read schemas are built from the SQLModel rows (`from_attributes`); enum
columns are stored as plain strings and validated back into enums here.
"""

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from idp_service.domain.models import (
    ChatRole,
    DeploymentEnvironment,
    DeploymentStatus,
    ServiceStatus,
    ServiceTier,
)


class SuccessResponse(BaseModel):
    """Acknowledgement returned by every mutation."""

    success: Literal[True] = True


class _ReadModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


# ===== Plugins =====


class PluginRead(_ReadModel):
    slug: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[str] = None
    version: Optional[str] = None
    enabled: bool
    config: Optional[Any] = None
    author: Optional[str] = None


class PluginToggle(BaseModel):
    enabled: bool


class PluginConfigUpdate(BaseModel):
    config: Any = Field(..., description="Arbitrary JSON configuration")


# ===== Services =====


class ServiceRead(_ReadModel):
    name: str
    slug: str
    description: Optional[str] = None
    owner: Optional[str] = None
    team: Optional[str] = None
    language: Optional[str] = None
    framework: Optional[str] = None
    repo_url: Optional[str] = None
    status: ServiceStatus
    tier: ServiceTier
    tags: Optional[List[str]] = None


class ServiceCreate(BaseModel):
    """New catalog entry; status starts as unknown."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=128)
    slug: str = Field(..., min_length=1, max_length=128, pattern=r"^[a-z0-9][a-z0-9-]*$")
    description: Optional[str] = None
    owner: Optional[str] = Field(None, max_length=128)
    team: Optional[str] = Field(None, max_length=128)
    language: Optional[str] = Field(None, max_length=64)
    framework: Optional[str] = Field(None, max_length=64)
    repo_url: Optional[str] = Field(None, max_length=512)
    tier: ServiceTier = ServiceTier.MEDIUM
    tags: Optional[List[str]] = None


class ServiceStatusUpdate(BaseModel):
    status: ServiceStatus


# ===== Deployments =====


class DeploymentRead(_ReadModel):
    service_id: int
    version: Optional[str] = None
    environment: DeploymentEnvironment
    status: DeploymentStatus
    triggered_by: Optional[str] = None
    commit_hash: Optional[str] = None
    commit_message: Optional[str] = None
    duration: Optional[int] = Field(None, description="Seconds; null while running")
    logs: Optional[str] = None


class DeploymentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    service_id: int = Field(..., gt=0)
    version: Optional[str] = Field(None, max_length=64)
    environment: DeploymentEnvironment = DeploymentEnvironment.DEVELOPMENT
    status: DeploymentStatus = DeploymentStatus.PENDING
    triggered_by: Optional[str] = Field(None, max_length=128)
    commit_hash: Optional[str] = Field(None, max_length=64)
    commit_message: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)
    logs: Optional[str] = None


# ===== Templates =====


class TemplateRead(_ReadModel):
    name: str
    description: Optional[str] = None
    language: Optional[str] = None
    framework: Optional[str] = None
    category: Optional[str] = None
    features: Optional[List[str]] = None
    popularity: int


# ===== AI assistant =====


class ChatMessage(BaseModel):
    role: ChatRole
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(..., min_length=1)
    session_id: Optional[int] = Field(None, description="Existing session to append to")


class ChatResponse(BaseModel):
    content: str


class AiSessionRead(_ReadModel):
    user_id: str
    title: Optional[str] = None
    messages: List[ChatMessage]

"""
SQLModel table for the plugin registry.

A plugin is a togglable feature of the portal. Enabling or disabling one only
changes what the UI shows; no code is loaded or unloaded.
"""
from typing import Any, Optional

from sqlalchemy import Column, Text
from sqlmodel import Field

from idp_service.infrastructure.database.base_model import BaseModel, JSONType


class Plugin(BaseModel, table=True):
    """
    Plugin registry entry.

    Attributes:
        slug: Unique, URL-safe identifier (e.g. "service-catalog")
        name: Display name
        description: Free-form description shown on the plugin card
        icon: Icon name understood by the UI
        category: Grouping used by the marketplace view
        version: Semantic version string
        enabled: Whether the UI shows the plugin
        config: Arbitrary JSON configuration edited from the plugin manager
        author: Owning team or person
    """

    __tablename__ = "plugins"

    slug: str = Field(max_length=64, unique=True, index=True, nullable=False)
    name: str = Field(max_length=128, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    icon: Optional[str] = Field(default=None, max_length=64)
    category: Optional[str] = Field(default=None, max_length=64)
    version: Optional[str] = Field(default="1.0.0", max_length=32)
    enabled: bool = Field(default=False, nullable=False)
    config: Optional[Any] = Field(default=None, sa_column=Column(JSONType, nullable=True))
    author: Optional[str] = Field(default=None, max_length=128)

    def __repr__(self) -> str:
        return f"Plugin(id={self.id}, slug={self.slug!r}, enabled={self.enabled})"

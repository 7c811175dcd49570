"""SQLModel table for onboarding templates."""
from typing import List, Optional

from sqlalchemy import Column, Text
from sqlmodel import Field

from idp_service.infrastructure.database.base_model import BaseModel, JSONType


class OnboardingTemplate(BaseModel, table=True):
    """
    Static project template offered to new developers.

    Templates are listed by popularity, highest first.
    """

    __tablename__ = "onboarding_templates"

    name: str = Field(max_length=128, nullable=False)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    language: Optional[str] = Field(default=None, max_length=64)
    framework: Optional[str] = Field(default=None, max_length=64)
    category: Optional[str] = Field(default=None, max_length=64)
    features: Optional[List[str]] = Field(default=None, sa_column=Column(JSONType, nullable=True))
    popularity: int = Field(default=0, nullable=False, index=True)

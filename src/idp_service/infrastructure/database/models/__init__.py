"""
Database models for the IDP service.

Importing this package registers every table with SQLModel.metadata.
"""

from .plugin import Plugin
from .service import Service
from .deployment import Deployment
from .template import OnboardingTemplate
from .ai_session import AiSession

__all__ = [
    "Plugin",
    "Service",
    "Deployment",
    "OnboardingTemplate",
    "AiSession",
]

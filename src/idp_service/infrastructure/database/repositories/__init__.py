"""Database repository implementations."""
from .base import BaseRepository
from .plugin import PluginRepository
from .service import ServiceRepository
from .deployment import DeploymentRepository
from .template import TemplateRepository
from .ai_session import AiSessionRepository

__all__ = [
    "BaseRepository",
    "PluginRepository",
    "ServiceRepository",
    "DeploymentRepository",
    "TemplateRepository",
    "AiSessionRepository",
]

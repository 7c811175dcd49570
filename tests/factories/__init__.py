# tests/factories/__init__.py
"""
Factory Boy factories for creating test data.
"""

from tests.factories.base import AsyncSQLModelFactory
from tests.factories.models import (
    AiSessionFactory,
    DeploymentFactory,
    PluginFactory,
    ServiceFactory,
    TemplateFactory,
)

__all__ = [
    "AsyncSQLModelFactory",
    "AiSessionFactory",
    "DeploymentFactory",
    "PluginFactory",
    "ServiceFactory",
    "TemplateFactory",
]

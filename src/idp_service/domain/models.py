"""
Domain enumerations shared by the database models, API schemas and mock data.
"""
from enum import Enum


class ServiceStatus(str, Enum):
    """Health status reported for a catalogued service."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


class ServiceTier(str, Enum):
    """Business criticality of a service."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DeploymentEnvironment(str, Enum):
    PRODUCTION = "production"
    STAGING = "staging"
    DEVELOPMENT = "development"


class DeploymentStatus(str, Enum):
    """
    Deployment lifecycle.

    pending -> building -> deploying -> success | failed | rolled_back
    """
    PENDING = "pending"
    BUILDING = "building"
    DEPLOYING = "deploying"
    SUCCESS = "success"
    FAILED = "failed"
    ROLLED_BACK = "rolled_back"


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"

"""Domain enumerations, metric derivation, and exceptions."""

from idp_service.domain.exceptions import (
    AppError,
    AlreadyExists,
    ExternalError,
    LLMError,
    DatabaseError,
)
from idp_service.domain.models import (
    ServiceStatus,
    ServiceTier,
    DeploymentEnvironment,
    DeploymentStatus,
    ChatRole,
)
from idp_service.domain.metrics import (
    Rating,
    DeploymentStats,
    Indicator,
    DoraMetrics,
    SpaceMetrics,
    derive_dora_metrics,
    space_metrics,
)

__all__ = [
    "AppError",
    "AlreadyExists",
    "ExternalError",
    "LLMError",
    "DatabaseError",
    "ServiceStatus",
    "ServiceTier",
    "DeploymentEnvironment",
    "DeploymentStatus",
    "ChatRole",
    "Rating",
    "DeploymentStats",
    "Indicator",
    "DoraMetrics",
    "SpaceMetrics",
    "derive_dora_metrics",
    "space_metrics",
]

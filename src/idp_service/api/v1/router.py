"""
API v1 router aggregator.

Routes included in v1:
    - /plugins - Plugin registry
    - /services - Service catalog
    - /deployments - Deployment history
    - /templates - Onboarding templates
    - /metrics - DORA and SPACE metrics
    - /ai - AI DevOps assistant

Routes NOT versioned (kept at root level):
    - /health/* - Health check endpoints
    - /auth/me, /auth/logout
"""

from fastapi import APIRouter

from idp_service.api.routes import ai, deployments, metrics, plugins, services, templates


router = APIRouter()

router.include_router(plugins.router, prefix="/plugins", tags=["Plugins"])
router.include_router(services.router, prefix="/services", tags=["Services"])
router.include_router(deployments.router, prefix="/deployments", tags=["Deployments"])
router.include_router(templates.router, prefix="/templates", tags=["Templates"])
router.include_router(metrics.router, prefix="/metrics", tags=["Metrics"])
router.include_router(ai.router, prefix="/ai", tags=["AI Assistant"])


__all__ = ["router"]

"""
Health probes.

    /health/live   process is up; checks nothing
    /health/ready  503 only when a configured database is unreachable
    /health        every component, for dashboards and on-call

Mock mode (no DATABASE_URL) and a missing LLM key are reported as
`degraded`: the API still answers, with demo data or without the assistant.
"""
import asyncio
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from idp_service.api.dependencies import AppSettings
from idp_service.config.settings import Settings
from idp_service.infrastructure.database.connection import db
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

_started_at = time.time()

router = APIRouter()


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class ComponentHealth(BaseModel):
    name: str
    status: HealthStatus
    latency_ms: Optional[float] = None
    details: Optional[Dict] = None
    error: Optional[str] = None


class LivenessResponse(BaseModel):
    status: str = "alive"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ReadinessResponse(BaseModel):
    status: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    components: List[ComponentHealth] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: HealthStatus
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    uptime_seconds: float
    version: str
    components: List[ComponentHealth] = Field(default_factory=list)


async def check_database(timeout: float = 5.0) -> ComponentHealth:
    if not db.is_connected:
        return ComponentHealth(
            name="database",
            status=HealthStatus.DEGRADED,
            details={"mode": "mock"},
            error="Database not configured, serving mock data",
        )

    started = time.perf_counter()
    try:
        await asyncio.wait_for(db.ping(), timeout=timeout)
    except asyncio.TimeoutError:
        error = f"No answer within {timeout}s"
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        error = f"{type(e).__name__}: {e}"
    else:
        return ComponentHealth(
            name="database",
            status=HealthStatus.HEALTHY,
            latency_ms=round((time.perf_counter() - started) * 1000, 2),
            details=db.get_pool_stats(),
        )

    return ComponentHealth(
        name="database",
        status=HealthStatus.UNHEALTHY,
        latency_ms=round((time.perf_counter() - started) * 1000, 2),
        error=error,
    )


def check_llm(settings: Settings) -> ComponentHealth:
    """Configuration only; the LLM endpoint is never called from a probe."""
    if settings.llm_api_key is None:
        return ComponentHealth(
            name="llm",
            status=HealthStatus.DEGRADED,
            error="LLM_API_KEY not set, AI assistant unavailable",
        )
    return ComponentHealth(name="llm", status=HealthStatus.HEALTHY, details={"model": settings.llm_model})


def overall_status(components: List[ComponentHealth]) -> HealthStatus:
    """Worst component wins."""
    for candidate in (HealthStatus.UNHEALTHY, HealthStatus.DEGRADED):
        if any(c.status == candidate for c in components):
            return candidate
    return HealthStatus.HEALTHY


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_probe():
    return LivenessResponse()


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_probe(response: Response):
    database = await check_database(timeout=3.0)

    if database.status == HealthStatus.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadinessResponse(status="not_ready", components=[database])
    return ReadinessResponse(status="ready", components=[database])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings):
    components = [await check_database(), check_llm(settings)]

    return HealthResponse(
        status=overall_status(components),
        uptime_seconds=round(time.time() - _started_at, 2),
        version=settings.app_version,
        components=components,
    )

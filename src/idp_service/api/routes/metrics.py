"""
Engineering metrics routes.

DORA indicators are derived from the deployment aggregates on every call;
nothing is precomputed or cached.
"""
from fastapi import APIRouter

from idp_service import data
from idp_service.domain.metrics import (
    DeploymentStats,
    DoraMetrics,
    SpaceMetrics,
    derive_dora_metrics,
    space_metrics,
)

router = APIRouter()


@router.get("/deployment-stats", response_model=DeploymentStats, summary="Raw deployment aggregates")
async def deployment_stats():
    return await data.deployment_stats()


@router.get("/dora", response_model=DoraMetrics, summary="DORA indicators")
async def dora_metrics():
    return derive_dora_metrics(await data.deployment_stats())


@router.get("/space", response_model=SpaceMetrics, summary="SPACE framework snapshot")
async def get_space_metrics():
    return space_metrics()

"""
Deployment accessors and aggregate statistics.

Without a database the statistics are computed over the mock deployments
with the same semantics as the SQL aggregate: AVG ignores rows whose
duration is NULL, and an empty set yields no average.
"""
from typing import Any, Dict, List, Optional

from idp_service.data import mock_data
from idp_service.data.store import has_store, serve_mock, skip_write, store_session
from idp_service.domain.metrics import DeploymentStats
from idp_service.domain.models import DeploymentStatus
from idp_service.infrastructure.database.models import Deployment
from idp_service.infrastructure.database.repositories import DeploymentRepository
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

SERVICE_DEPLOYMENTS_LIMIT = 10


async def recent_deployments(limit: int = 20) -> List[Deployment]:
    """Newest deployments first."""
    if not has_store():
        serve_mock("recent_deployments", limit=limit)
        return mock_data.deployments()[:limit]

    async with store_session() as session:
        return list(await DeploymentRepository(session).recent(limit))


async def deployments_for_service(service_id: int) -> List[Deployment]:
    if not has_store():
        serve_mock("deployments_for_service", service_id=service_id)
        matching = [d for d in mock_data.deployments() if d.service_id == service_id]
        return matching[:SERVICE_DEPLOYMENTS_LIMIT]

    async with store_session() as session:
        return list(await DeploymentRepository(session).for_service(service_id, SERVICE_DEPLOYMENTS_LIMIT))


async def get_deployment(deployment_id: int) -> Optional[Deployment]:
    if not has_store():
        serve_mock("get_deployment", deployment_id=deployment_id)
        return next((d for d in mock_data.deployments() if d.id == deployment_id), None)

    async with store_session() as session:
        return await DeploymentRepository(session).get(deployment_id)


async def create_deployment(data: Dict[str, Any]) -> None:
    if not has_store():
        skip_write("create_deployment", service_id=data.get("service_id"))
        return

    async with store_session() as session:
        deployment = await DeploymentRepository(session).create(Deployment(**data))

    logger.info(
        "Deployment recorded",
        deployment_id=deployment.id,
        service_id=deployment.service_id,
        status=deployment.status,
    )


def _aggregate(deployments: List[Deployment]) -> DeploymentStats:
    durations = [d.duration for d in deployments if d.duration is not None]
    return DeploymentStats(
        total=len(deployments),
        success=sum(1 for d in deployments if d.status == DeploymentStatus.SUCCESS.value),
        failed=sum(1 for d in deployments if d.status == DeploymentStatus.FAILED.value),
        avg_duration=sum(durations) / len(durations) if durations else None,
    )


async def deployment_stats() -> DeploymentStats:
    """Count, success/failure counts and average duration over all deployments."""
    if not has_store():
        serve_mock("deployment_stats")
        return _aggregate(mock_data.deployments())

    async with store_session() as session:
        return await DeploymentRepository(session).stats()

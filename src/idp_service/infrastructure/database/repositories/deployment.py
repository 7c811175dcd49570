"""
Deployment repository.

Besides the newest-first listings it computes the aggregate counts that feed
the DORA metric derivation.
"""
from typing import Sequence

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from idp_service.domain.metrics import DeploymentStats
from idp_service.domain.models import DeploymentStatus
from idp_service.infrastructure.database.models.deployment import Deployment
from idp_service.infrastructure.database.repositories.base import BaseRepository


class DeploymentRepository(BaseRepository[Deployment]):
    """Repository for Deployment rows."""

    def __init__(self, session: AsyncSession):
        super().__init__(Deployment, session)

    async def recent(self, limit: int = 20) -> Sequence[Deployment]:
        """Newest deployments first."""
        return await self.get_many(limit=limit, sort_by="created_at", order="desc")

    async def for_service(self, service_id: int, limit: int = 10) -> Sequence[Deployment]:
        """Newest deployments of one service."""
        return await self.get_many(
            limit=limit,
            sort_by="created_at",
            order="desc",
            service_id=service_id,
        )

    async def stats(self) -> DeploymentStats:
        """
        Aggregate counts over all deployments.

        SUM over an empty table is NULL, so missing values collapse to zero.
        """
        query = select(
            func.count(Deployment.id),
            func.sum(case((Deployment.status == DeploymentStatus.SUCCESS.value, 1), else_=0)),
            func.sum(case((Deployment.status == DeploymentStatus.FAILED.value, 1), else_=0)),
            func.avg(Deployment.duration),
        )
        self._log_query(query)

        result = await self.session.execute(query)
        total, success, failed, avg_duration = result.one()

        return DeploymentStats(
            total=int(total or 0),
            success=int(success or 0),
            failed=int(failed or 0),
            avg_duration=float(avg_duration) if avg_duration is not None else None,
        )

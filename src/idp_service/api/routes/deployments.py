"""Deployment routes."""
from typing import List, Optional

from fastapi import APIRouter, Query

from idp_service import data
from idp_service.api.dependencies import CurrentUser
from idp_service.api.schemas.portal import DeploymentCreate, DeploymentRead, SuccessResponse

router = APIRouter()


@router.get("", response_model=List[DeploymentRead], summary="Recent deployments, newest first")
async def recent_deployments(
    limit: int = Query(20, ge=1, le=100, description="Maximum number of deployments"),
):
    return await data.recent_deployments(limit)


@router.get(
    "/by-service/{service_id}",
    response_model=List[DeploymentRead],
    summary="Latest deployments of a service",
    description="At most 10, newest first.",
)
async def deployments_for_service(service_id: int):
    return await data.deployments_for_service(service_id)


@router.get(
    "/{deployment_id}",
    response_model=Optional[DeploymentRead],
    summary="Get deployment by id",
    description="Returns `null` for unknown ids.",
)
async def get_deployment(deployment_id: int):
    return await data.get_deployment(deployment_id)


@router.post(
    "",
    response_model=SuccessResponse,
    summary="Record a deployment",
    responses={401: {"description": "Not authenticated"}},
)
async def create_deployment(body: DeploymentCreate, user: CurrentUser):
    payload = body.model_dump(mode="json")
    if payload["triggered_by"] is None:
        payload["triggered_by"] = user.name or user.id
    await data.create_deployment(payload)
    return SuccessResponse()

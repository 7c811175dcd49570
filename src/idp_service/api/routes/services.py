"""Service catalog routes."""
from typing import List, Optional

from fastapi import APIRouter, status

from idp_service import data
from idp_service.api.dependencies import CurrentUser
from idp_service.api.schemas.portal import (
    ServiceCreate,
    ServiceRead,
    ServiceStatusUpdate,
    SuccessResponse,
)
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=List[ServiceRead], summary="List catalogued services")
async def list_services():
    return await data.list_services()


@router.get(
    "/{service_id}",
    response_model=Optional[ServiceRead],
    summary="Get service by id",
    description="Returns `null` for unknown ids.",
)
async def get_service(service_id: int):
    return await data.get_service(service_id)


@router.post(
    "",
    response_model=SuccessResponse,
    summary="Register a service",
    description="""
    Add a service to the catalog. Its health status starts as `unknown`.

    **Authentication Required:** Bearer token
    """,
    responses={
        401: {"description": "Not authenticated"},
        409: {"description": "Slug already in use"},
    },
)
async def create_service(body: ServiceCreate, user: CurrentUser):
    await data.create_service(body.model_dump(mode="json"))
    return SuccessResponse()


@router.patch(
    "/{service_id}/status",
    response_model=SuccessResponse,
    status_code=status.HTTP_200_OK,
    summary="Update a service's health status",
    responses={401: {"description": "Not authenticated"}},
)
async def update_service_status(service_id: int, body: ServiceStatusUpdate, user: CurrentUser):
    await data.update_service_status(service_id, body.status.value)
    logger.info("Service status changed", service_id=service_id, status=body.status.value, user_id=user.id)
    return SuccessResponse()

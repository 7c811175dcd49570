"""Plugin registry routes."""
from typing import List, Optional

from fastapi import APIRouter

from idp_service import data
from idp_service.api.dependencies import CurrentUser
from idp_service.api.schemas.portal import (
    PluginConfigUpdate,
    PluginRead,
    PluginToggle,
    SuccessResponse,
)
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=List[PluginRead], summary="List plugins")
async def list_plugins():
    return await data.list_plugins()


@router.get(
    "/by-slug/{slug}",
    response_model=Optional[PluginRead],
    summary="Get plugin by slug",
    description="Returns `null` when no plugin has the slug.",
)
async def get_plugin_by_slug(slug: str):
    return await data.get_plugin_by_slug(slug)


@router.post(
    "/{plugin_id}/toggle",
    response_model=SuccessResponse,
    summary="Enable or disable a plugin",
    responses={401: {"description": "Not authenticated"}},
)
async def toggle_plugin(plugin_id: int, body: PluginToggle, user: CurrentUser):
    await data.toggle_plugin(plugin_id, body.enabled)
    logger.info("Plugin toggled", plugin_id=plugin_id, enabled=body.enabled, user_id=user.id)
    return SuccessResponse()


@router.put(
    "/{plugin_id}/config",
    response_model=SuccessResponse,
    summary="Replace a plugin's configuration",
    responses={401: {"description": "Not authenticated"}},
)
async def update_plugin_config(plugin_id: int, body: PluginConfigUpdate, user: CurrentUser):
    await data.update_plugin_config(plugin_id, body.config)
    logger.info("Plugin config updated", plugin_id=plugin_id, user_id=user.id)
    return SuccessResponse()

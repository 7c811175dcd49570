"""
Data access layer.

One function per entity operation. Each uses the database when one was
connected at startup and otherwise serves the built-in mock dataset
(reads) or skips the write with a warning.
"""
from idp_service.data.plugins import (
    list_plugins,
    get_plugin_by_slug,
    toggle_plugin,
    update_plugin_config,
)
from idp_service.data.catalog import (
    list_services,
    get_service,
    create_service,
    update_service_status,
)
from idp_service.data.deployments import (
    recent_deployments,
    deployments_for_service,
    get_deployment,
    create_deployment,
    deployment_stats,
)
from idp_service.data.templates import list_templates
from idp_service.data.ai_sessions import (
    user_sessions,
    get_session,
    create_session,
    update_session_messages,
)
from idp_service.data.store import has_store

__all__ = [
    "list_plugins",
    "get_plugin_by_slug",
    "toggle_plugin",
    "update_plugin_config",
    "list_services",
    "get_service",
    "create_service",
    "update_service_status",
    "recent_deployments",
    "deployments_for_service",
    "get_deployment",
    "create_deployment",
    "deployment_stats",
    "list_templates",
    "user_sessions",
    "get_session",
    "create_session",
    "update_session_messages",
    "has_store",
]

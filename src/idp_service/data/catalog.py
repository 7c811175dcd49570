"""
Service catalog accessors.

`create_service` translates a unique-slug violation into AlreadyExists so the
API answers 409 instead of a generic database failure.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from idp_service.data import mock_data
from idp_service.data.store import has_store, serve_mock, skip_write, store_session
from idp_service.domain.exceptions import AlreadyExists
from idp_service.infrastructure.database.models import Service
from idp_service.infrastructure.database.repositories import ServiceRepository
from idp_service.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


async def list_services() -> List[Service]:
    if not has_store():
        serve_mock("list_services")
        return mock_data.services()

    async with store_session() as session:
        return list(await ServiceRepository(session).list_all())


async def get_service(service_id: int) -> Optional[Service]:
    if not has_store():
        serve_mock("get_service", service_id=service_id)
        return next((s for s in mock_data.services() if s.id == service_id), None)

    async with store_session() as session:
        return await ServiceRepository(session).get(service_id)


async def create_service(data: Dict[str, Any]) -> None:
    if not has_store():
        skip_write("create_service", slug=data.get("slug"))
        return

    try:
        async with store_session() as session:
            service = await ServiceRepository(session).create(Service(**data))
    except IntegrityError as e:
        logger.warning("Service slug already taken", slug=data.get("slug"))
        raise AlreadyExists(
            "A service with this slug already exists",
            details={"slug": data.get("slug")},
        ) from e

    logger.info("Service created", service_id=service.id, slug=service.slug)


async def update_service_status(service_id: int, status: str) -> None:
    if not has_store():
        skip_write("update_service_status", service_id=service_id, status=status)
        return

    async with store_session() as session:
        await ServiceRepository(session).set_status(service_id, status)

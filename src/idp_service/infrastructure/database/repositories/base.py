from typing import Generic, Literal, Sequence, TypeVar

from sqlalchemy import Select, asc, desc, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from idp_service.interfaces import IRepository
from idp_service.infrastructure.observability.logging import get_logger

T = TypeVar("T", bound=SQLModel)

logger = get_logger(__name__)


class BaseRepository(IRepository[T], Generic[T]):
    """
    IRepository over one SQLModel table.

    Writes flush and refresh inside the caller's session; committing is left
    to `DatabaseManager.session()`. Statements are logged at DEBUG.

    Example:
        class TemplateRepository(BaseRepository[OnboardingTemplate]):
            def __init__(self, session: AsyncSession):
                super().__init__(OnboardingTemplate, session)

            async def by_popularity(self):
                return await self.get_many(limit=None, sort_by="popularity")
    """

    def __init__(self, model: type[T], session: AsyncSession):
        self.model = model
        self.session = session

    def _log_query(self, query: Select, **params) -> None:
        logger.debug("Query", table=self.model.__tablename__, sql=str(query), **params)

    async def get(self, id: int) -> T | None:
        return await self.session.get(self.model, id)

    async def get_by(self, field_name: str, value) -> T | None:
        """First row whose `field_name` equals `value`."""
        query = select(self.model).where(getattr(self.model, field_name) == value).limit(1)
        self._log_query(query, **{field_name: value})
        result = await self.session.execute(query)
        return result.scalars().first()

    async def get_many(
        self,
        skip: int = 0,
        limit: int | None = 100,
        sort_by: str | None = None,
        order: Literal["asc", "desc"] = "desc",
        **filters,
    ) -> Sequence[T]:
        """
        Rows matching the equality `filters`.

        Without `sort_by` rows come back in id order. `limit=None` returns
        every match.
        """
        query = select(self.model)
        for key, value in filters.items():
            query = query.where(getattr(self.model, key) == value)

        if sort_by:
            query = self.apply_sorting(query, sort_by, order)
        else:
            query = query.order_by(asc(self.model.id))

        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        self._log_query(query, **filters)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def create(self, entity: T) -> T:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, id: int, **values) -> T | None:
        entity = await self.get(id)
        if entity is None:
            return None

        for key, value in values.items():
            setattr(entity, key, value)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    def apply_sorting(self, query: Select, sort_by: str, order: Literal["asc", "desc"] = "desc") -> Select:
        """Order by `sort_by` with id as tie-breaker in the same direction."""
        direction = asc if order == "asc" else desc
        return query.order_by(direction(getattr(self.model, sort_by)), direction(self.model.id))

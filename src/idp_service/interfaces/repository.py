from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Persistence contract for one portal entity.

    Entities are never deleted through the API, so there is no delete.
    """

    @abstractmethod
    async def get(self, id: int) -> T | None:
        ...

    @abstractmethod
    async def get_many(self, skip: int = 0, limit: int | None = 100, **filters: Any) -> Sequence[T]:
        """Rows matching equality `filters`."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Insert and return the row with its generated id."""

    @abstractmethod
    async def update(self, id: int, **values: Any) -> T | None:
        """Set `values` on the row; None when `id` does not exist."""

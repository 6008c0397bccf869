"""Base repository with generic CRUD operations."""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic repository for one model.

    Queries take SQLAlchemy criteria (``Book.author == "x"``) so subclasses
    express their filters once and reuse them for both listing and counting.

    Attributes:
        model: The SQLAlchemy model class this repository manages.
        session: The async database session.
    """

    def __init__(self, model: type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    async def create(self, **values: Any) -> ModelType:
        """Insert a new entity and load its server-side defaults."""
        instance = self.model(**values)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get_by_id(self, entity_id: UUID) -> ModelType | None:
        return await self.session.get(self.model, entity_id)

    async def find(
        self,
        *criteria: ColumnElement[bool],
        offset: int = 0,
        limit: int | None = None,
        order_by: Sequence[Any] = (),
    ) -> list[ModelType]:
        """Entities matching every criterion.

        Args:
            *criteria: Filter expressions, combined with AND.
            offset: Number of records to skip.
            limit: Maximum number of records, or None for all.
            order_by: Columns or expressions to sort by.

        Returns:
            Matching entities in the requested order.
        """
        query = select(self.model).where(*criteria).order_by(*order_by).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_one(self, *criteria: ColumnElement[bool]) -> ModelType | None:
        """The single entity matching ``criteria``, if any."""
        result = await self.session.execute(select(self.model).where(*criteria))
        return result.scalar_one_or_none()

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        """Number of entities matching every criterion."""
        query = select(func.count()).select_from(self.model).where(*criteria)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def exists(self, *criteria: ColumnElement[bool]) -> bool:
        return await self.count(*criteria) > 0

    async def update(self, entity: ModelType, **values: Any) -> ModelType:
        """Set known attributes on ``entity`` and flush; unknown keys are skipped."""
        for key, value in values.items():
            if hasattr(entity, key):
                setattr(entity, key, value)

        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        await self.session.delete(entity)
        await self.session.flush()

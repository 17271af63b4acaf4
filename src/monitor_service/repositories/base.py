"""Base repository with common CRUD operations."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.monitor_service.core.exceptions import NotFoundError, StorageError

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Every public method is one storage operation. Writes commit before
    returning, so each call is atomic on its own; nothing spans calls.
    Database failures are rolled back and re-raised as StorageError.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def storage_errors(self, operation: str) -> AsyncGenerator[None]:
        """Translate SQLAlchemy failures inside the block into StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError(f"{self.model.__name__} {operation} failed: {e}") from e

    async def get_by_id(self, id: Any) -> ModelType:
        """Get a record by its primary key. Raises NotFoundError if absent."""
        async with self.storage_errors("get"):
            result = await self.session.execute(
                select(self.model)
                .where(self.model.id == id)  # type: ignore[attr-defined]
                .execution_options(populate_existing=True)
            )
            entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFoundError(f"{self.model.__name__} {id} not found")
        return entity

    async def list_where(self, *criteria: Any, offset: int, limit: int) -> list[ModelType]:
        """List records matching `criteria`, ordered by primary key ascending."""
        query = select(self.model)
        if criteria:
            query = query.where(*criteria)
        query = (
            query.order_by(self.model.id.asc())  # type: ignore[attr-defined]
            .offset(offset)
            .limit(limit)
        )
        async with self.storage_errors("list"):
            result = await self.session.execute(query)
            return list(result.scalars().all())

    async def count_where(self, *criteria: Any) -> int:
        """Count records matching `criteria` (all records when none given)."""
        query = select(func.count()).select_from(self.model)
        if criteria:
            query = query.where(*criteria)
        async with self.storage_errors("count"):
            result = await self.session.execute(query)
            return int(result.scalar_one())

    async def insert(self, entity: ModelType) -> None:
        """Insert entity and commit."""
        async with self.storage_errors("insert"):
            self.session.add(entity)
            await self.session.commit()

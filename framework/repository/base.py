"""
Repository abstract base class and generic implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, Type, Any
from loguru import logger
from sqlalchemy.exc import MultipleResultsFound
from sqlmodel import SQLModel, select
from sqlmodel.sql.expression import SelectOfScalar
from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[T]):
    """Repository interface; defines standard data access API."""

    @abstractmethod
    def get(self) -> SelectOfScalar[T]:
        """Statement over all entities (unordered, not executed)."""
        pass

    @abstractmethod
    async def get_by_id(self, *criteria: Any) -> Optional[T]:
        """Get the single entity matching the criteria."""
        pass

    @abstractmethod
    def add(self, entity: T) -> T:
        """Stage a new entity."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Stage changes of an entity."""
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Stage removal of an entity."""
        pass


class BaseRepository(IRepository[T]):
    """Generic repository over one SQLModel table; subclasses add listing queries.

    Nothing here commits: staged changes are written by the owning UnitOfWork.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = session
        self.model = model

    def get(self) -> SelectOfScalar[T]:
        """Return a select over every row; callers add ordering, filters and paging."""
        return select(self.model)

    async def get_by_id(self, *criteria: Any) -> Optional[T]:
        """Get the entity matching the criteria, e.g. ``get_by_id(Product.id == 3)``.

        Returns None when nothing matches and when the criteria are ambiguous.
        """
        statement = self.get().where(*criteria)
        result = await self.session.exec(statement)
        try:
            return result.one_or_none()
        except MultipleResultsFound:
            logger.warning(f"{self.model.__name__}: criteria matched more than one row")
            return None

    def add(self, entity: T) -> T:
        """Stage a new entity."""
        self.session.add(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Stage changes; detached or freshly built entities are merged by primary key."""
        return await self.session.merge(entity)

    async def delete(self, entity: T) -> None:
        """Stage removal of an entity."""
        await self.session.delete(entity)

"""
Repository abstract base class and generic implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Type
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[T]):
    """Repository interface; defines standard data access API.

    Every mutating method only stages work on the session; nothing is written
    until the owning UnitOfWork saves.
    """

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Get all entities."""
        pass

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, None when no row matches."""
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Stage entity for insertion."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Stage a full overwrite of the row identified by entity.id."""
        pass

    @abstractmethod
    async def remove(self, id: int) -> bool:
        """Stage deletion of the row with this ID if it exists."""
        pass


class BaseRepository(IRepository[T]):
    """Generic repository implementation with SQLModel CRUD; subclasses can add custom queries."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = session
        self.model = model

    async def get_all(self) -> List[T]:
        statement = select(self.model)
        result = await self.session.exec(statement)
        return list(result.all())

    async def get_by_id(self, id: int) -> Optional[T]:
        # Query instead of session.get(): the identity map may hold rows already
        # removed by an ON DELETE CASCADE in the store
        statement = select(self.model).where(self.model.id == id)
        result = await self.session.exec(statement)
        return result.first()

    async def add(self, entity: T) -> T:
        self.session.add(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Attach a detached entity as modified.

        merge() copies every column of ``entity`` onto the persistent instance,
        so fields the caller left at their defaults are overwritten too.
        """
        return await self.session.merge(entity)

    async def remove(self, id: int) -> bool:
        entity = await self.get_by_id(id)
        if entity is None:
            return False
        await self.session.delete(entity)
        return True

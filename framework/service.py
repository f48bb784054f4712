"""
Generic CRUD service: existence checks before mutation, not-found signalling,
persistence delegated to the UnitOfWork.
"""

from typing import Generic, List, Optional, Type, TypeVar
from sqlmodel import SQLModel
from framework.exceptions.handler import NotFoundException, ValidationException
from framework.logging.logger import get_logger
from framework.repository.base import BaseRepository
from framework.repository.unit_of_work import UnitOfWork

T = TypeVar("T", bound=SQLModel)


class CrudService(Generic[T]):
    """Base for per-entity services. Subclasses set entity_name and repository_class."""

    entity_name: str = "Entity"
    repository_class: Type[BaseRepository] = BaseRepository

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.logger = get_logger(f"{self.entity_name.lower()}_service")

    @property
    def repository(self) -> BaseRepository:
        return self.uow.get_repository(self.repository_class)

    async def list(self) -> List[T]:
        return await self.repository.get_all()

    async def get(self, id: int) -> T:
        return await self._get_or_raise(id)

    async def add(self, entity: Optional[T]) -> T:
        if entity is None:
            raise ValidationException(f"{self.entity_name} payload is required")
        await self._validate(entity)

        await self.repository.add(entity)
        await self.uow.save()
        self.logger.info(f"{self.entity_name} {entity.id} created")
        return entity

    async def update(self, entity: T) -> T:
        """Overwrite every field of the stored record with the incoming one."""
        if entity is None:
            raise ValidationException(f"{self.entity_name} payload is required")
        await self._get_or_raise(entity.id)
        await self._validate(entity)

        merged = await self.repository.update(entity)
        await self.uow.save()
        self.logger.info(f"{self.entity_name} {entity.id} updated")
        return merged

    async def delete(self, id: int) -> None:
        await self._get_or_raise(id)

        await self.repository.remove(id)
        await self.uow.save()
        self.logger.info(f"{self.entity_name} {id} deleted")

    async def _validate(self, entity: T) -> None:
        """Hook for cross-entity checks before add/update."""

    async def _get_or_raise(self, id: int) -> T:
        entity = await self.repository.get_by_id(id)
        if entity is None:
            raise NotFoundException(f"{self.entity_name} with ID {id} not found.")
        return entity

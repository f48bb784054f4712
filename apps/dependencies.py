"""
Request-scoped dependencies shared by the app routers: one session and one UnitOfWork per request.
"""
from typing import AsyncGenerator
from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.manager import DatabaseManager
from framework.repository.unit_of_work import UnitOfWork
from .registry import repository_registry

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    manager = DatabaseManager.get_instance()
    async for session in manager.sql.get_session():
        yield session

async def get_uow(
    db: AsyncSession = Depends(get_db)
) -> AsyncGenerator[UnitOfWork, None]:
    """Dependency: create UnitOfWork, released once the request is done."""
    uow = UnitOfWork(session=db, registry=repository_registry)
    try:
        yield uow
    finally:
        await uow.close()

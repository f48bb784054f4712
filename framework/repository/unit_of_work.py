"""
Unit of Work: manages repositories and transaction boundaries.
"""

from typing import Dict, Optional, Type, TypeVar
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.logging.logger import get_logger
from .registry import RepositoryRegistry

R = TypeVar("R")

logger = get_logger("unit_of_work")


class UnitOfWork:
    """Manages related repositories with a shared session and transaction commit/rollback.

    One instance per request: repositories are cached per class for the lifetime of
    the unit of work and never outlive it. Nothing is committed implicitly; callers
    persist staged changes with save().
    """

    def __init__(self, session: Optional[AsyncSession] = None, registry: Optional[RepositoryRegistry] = None):
        """Initialize UnitOfWork; session and registry must be provided."""
        if session is None:
            raise ValueError("Session must be provided.")
        if registry is None:
            raise ValueError("Repository registry must be provided.")

        self.session = session
        self.registry = registry
        self._repositories: Dict[Type, object] = {}
        self._closed = False

    def get_repository(self, repo_class: Type[R]) -> R:
        """Get or create a repository instance (cached per class).

        Raises RepositoryNotRegisteredError when the registry has no factory for repo_class.
        """
        if repo_class not in self._repositories:
            self._repositories[repo_class] = self.registry.resolve(repo_class, self.session)
        return self._repositories[repo_class]

    def pending_changes(self) -> int:
        """Number of entities with staged inserts, updates or deletes."""
        modified = sum(1 for obj in self.session.dirty if self.session.is_modified(obj))
        return len(self.session.new) + len(self.session.deleted) + modified

    async def save(self) -> int:
        """Commit all staged changes atomically; returns the number of entities written."""
        affected = self.pending_changes()
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.debug(f"Committed {affected} change(s)")
        return affected

    async def rollback(self) -> None:
        """Rollback all changes."""
        await self.session.rollback()

    async def flush(self) -> None:
        """Flush session (e.g. to get auto-increment IDs)."""
        await self.session.flush()

    async def close(self) -> None:
        """Release the session; later calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        self._repositories.clear()
        await self.session.close()

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                await self.rollback()
        finally:
            await self.close()

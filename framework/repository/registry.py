"""
Repository registry: maps a repository class to the factory that builds it for a session.
"""

from typing import Any, Callable, Dict, Optional, Type
from sqlmodel.ext.asyncio.session import AsyncSession

RepositoryFactory = Callable[[AsyncSession], Any]


class RepositoryNotRegisteredError(LookupError):
    """No factory is registered for the requested repository class."""

    def __init__(self, key: Type):
        super().__init__(f"Repository {key.__name__} is not registered")
        self.key = key


class RepositoryRegistry:
    """Registry of repository factories, filled once at startup.

    The key is the class callers ask the UnitOfWork for; the factory receives the
    unit of work's session. Without an explicit factory the key class itself is
    used, so ``registry.register(BookRepository)`` works as a decorator too.
    """

    def __init__(self):
        self._factories: Dict[Type, RepositoryFactory] = {}

    def register(self, key: Type, factory: Optional[RepositoryFactory] = None):
        self._factories[key] = factory or key
        return key

    def resolve(self, key: Type, session: AsyncSession) -> Any:
        factory = self._factories.get(key)
        if factory is None:
            raise RepositoryNotRegisteredError(key)
        return factory(session)

    def __contains__(self, key: Type) -> bool:
        return key in self._factories

    def __len__(self) -> int:
        return len(self._factories)

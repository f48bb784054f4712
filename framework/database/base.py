from abc import ABC, abstractmethod

class BaseDatabaseDriver(ABC):
    """Lifecycle contract for a store connection owned by DatabaseManager."""

    @abstractmethod
    async def connect(self):
        pass

    @abstractmethod
    async def disconnect(self):
        pass

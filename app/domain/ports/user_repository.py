from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from app.domain.entities.user import User

class UserRepositoryPort(ABC):
    @abstractmethod
    async def insert(self, user: User) -> User:
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> User | None:
        pass

    @abstractmethod
    def find_all(self) -> AsyncIterator[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Upsert pelo id."""
        pass

    @abstractmethod
    async def find_and_remove(self, id: str) -> User | None:
        pass

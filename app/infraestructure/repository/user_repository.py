import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.utils.result import StorageError
from app.domain.ports.user_repository import UserRepositoryPort
from app.domain.entities.user import User

logger = logging.getLogger(__name__)


@asynccontextmanager
async def storage_error_handler(db: AsyncSession, operation: str):
    """
    Converte erros do SQLAlchemy em StorageError, com rollback da sessão.

        async with storage_error_handler(self.db, "insert"):
            ...
    """
    try:
        yield
    except SQLAlchemyError as exc:
        try:
            await db.rollback()
        except SQLAlchemyError:
            logger.exception("repo.rollback_failed", extra={"operation": operation})
        logger.exception("repo.storage_error", extra={"operation": operation})
        raise StorageError(f"Failed to {operation} user") from exc


class UserRepository(UserRepositoryPort):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, user: User) -> User:
        async with storage_error_handler(self.db, "insert"):
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
        logger.info("repo.insert.success", extra={"id": user.id})
        return user

    async def find_by_id(self, id: str) -> User | None:
        async with storage_error_handler(self.db, "find"):
            return await self.db.get(User, id)

    async def find_all(self) -> AsyncIterator[User]:
        async with storage_error_handler(self.db, "list"):
            result = await self.db.execute(select(User))
            users = result.scalars().all()
        for user in users:
            yield user

    async def save(self, user: User) -> User:
        async with storage_error_handler(self.db, "save"):
            # merge faz o upsert pelo id
            merged = await self.db.merge(user)
            await self.db.commit()
            await self.db.refresh(merged)
        logger.info("repo.save.success", extra={"id": merged.id})
        return merged

    async def find_and_remove(self, id: str) -> User | None:
        async with storage_error_handler(self.db, "remove"):
            user = await self.db.get(User, id)
            if user is None:
                return None
            await self.db.delete(user)
            await self.db.commit()
        logger.info("repo.remove.success", extra={"id": id})
        return user

"""
Shared fixtures.

- `fake_repository`: in-memory implementation of UserRepositoryPort, used by the
  use case and route tests so they never touch a database.
- `db_session`: AsyncSession on a fresh in-memory SQLite database (aiosqlite),
  used by the SQLAlchemy repository tests.
- `client`: TestClient over `create_app()` with the repository dependency
  overridden by `fake_repository`.
"""
import logging
from collections.abc import AsyncGenerator, AsyncIterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.application.dtos.user import UserRequest
from app.application.mappers.user_mapper import UserMapper
from app.core.db import Base
from app.core.utils.result import StorageError
from app.domain.entities.user import User, new_user_id
from app.domain.ports.user_repository import UserRepositoryPort
from app.infraestructure.dependencies import get_user_repository
from app.infraestructure.repository.user_repository import UserRepository
from app.main import create_app

for _name in ("sqlalchemy", "aiosqlite", "httpx", "asyncio"):
    logging.getLogger(_name).setLevel(logging.WARNING)


NAME = "Lincon"
EMAIL = "lincon@google.com"
PASSWORD = "123"


class InMemoryUserRepository(UserRepositoryPort):
    def __init__(self):
        self.users: dict[str, User] = {}
        self.calls: list[str] = []

    async def insert(self, user: User) -> User:
        self.calls.append("insert")
        user.id = new_user_id()
        self.users[user.id] = user
        return user

    async def find_by_id(self, id: str) -> User | None:
        self.calls.append("find_by_id")
        return self.users.get(id)

    async def find_all(self) -> AsyncIterator[User]:
        self.calls.append("find_all")
        for user in list(self.users.values()):
            yield user

    async def save(self, user: User) -> User:
        self.calls.append("save")
        self.users[user.id] = user
        return user

    async def find_and_remove(self, id: str) -> User | None:
        self.calls.append("find_and_remove")
        return self.users.pop(id, None)

    def add(self, name: str = NAME, email: str = EMAIL, password: str = PASSWORD) -> User:
        user = User(id=new_user_id(), name=name, email=email, password=password)
        self.users[user.id] = user
        return user


class BrokenUserRepository(InMemoryUserRepository):
    """Every call fails the way the SQLAlchemy adapter reports storage errors."""

    async def insert(self, user: User) -> User:
        raise StorageError("Failed to insert user")

    async def find_by_id(self, id: str) -> User | None:
        raise StorageError("Failed to find user")


@pytest.fixture
def valid_request() -> UserRequest:
    return UserRequest(name=NAME, email=EMAIL, password=PASSWORD)


@pytest.fixture
def mapper() -> UserMapper:
    return UserMapper()


@pytest.fixture
def fake_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def app(fake_repository):
    application = create_app()
    application.dependency_overrides[get_user_repository] = lambda: fake_repository
    return application


@pytest.fixture
def client(app) -> TestClient:
    # Sem o context manager: o lifespan (create_all no banco real) não roda
    return TestClient(app)


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    maker = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def broken_repository() -> BrokenUserRepository:
    return BrokenUserRepository()

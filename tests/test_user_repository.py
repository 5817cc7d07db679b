import pytest

from app.core.utils.result import StorageError
from app.domain.entities.user import User
from app.infraestructure.repository.user_repository import UserRepository


def new_user(name: str = "Lincon", email: str = "lincon@google.com", password: str = "123") -> User:
    return User(name=name, email=email, password=password)


class TestUserRepositoryInsert:
    """
    insert() must let the storage assign the id; callers never provide one.
    """

    async def test_insert_assigns_id(self, user_repository: UserRepository):
        user = await user_repository.insert(new_user())

        assert user.id is not None
        assert len(user.id) == 32
        assert user.name == "Lincon"

    async def test_insert_gives_distinct_ids(self, user_repository: UserRepository):
        first = await user_repository.insert(new_user())
        second = await user_repository.insert(new_user(name="Outro"))

        assert first.id != second.id

    async def test_constraint_failure_becomes_storage_error(self, user_repository: UserRepository):
        with pytest.raises(StorageError):
            await user_repository.insert(User(name=None, email="lincon@google.com", password="123"))

        # a sessão foi revertida e continua utilizável
        user = await user_repository.insert(new_user())
        assert user.id is not None


class TestUserRepositoryFind:
    async def test_find_by_id(self, user_repository: UserRepository):
        created = await user_repository.insert(new_user())

        found = await user_repository.find_by_id(created.id)

        assert found is not None
        assert found.email == "lincon@google.com"

    async def test_find_by_id_missing_returns_none(self, user_repository: UserRepository):
        assert await user_repository.find_by_id("123456") is None

    async def test_find_all_empty(self, user_repository: UserRepository):
        assert [user async for user in user_repository.find_all()] == []

    async def test_find_all_returns_every_user(self, user_repository: UserRepository):
        await user_repository.insert(new_user(name="Primeiro"))
        await user_repository.insert(new_user(name="Segundo"))

        names = sorted([user.name async for user in user_repository.find_all()])

        assert names == ["Primeiro", "Segundo"]


class TestUserRepositorySaveAndRemove:
    async def test_save_upserts_by_id(self, user_repository: UserRepository):
        created = await user_repository.insert(new_user())

        saved = await user_repository.save(
            User(id=created.id, name="Novo Nome", email=created.email, password=created.password)
        )

        assert saved.id == created.id
        assert saved.name == "Novo Nome"
        found = await user_repository.find_by_id(created.id)
        assert found.name == "Novo Nome"

    async def test_find_and_remove(self, user_repository: UserRepository):
        created = await user_repository.insert(new_user())

        removed = await user_repository.find_and_remove(created.id)

        assert removed.id == created.id
        assert removed.name == "Lincon"
        assert await user_repository.find_by_id(created.id) is None

    async def test_find_and_remove_missing_returns_none(self, user_repository: UserRepository):
        assert await user_repository.find_and_remove("123456") is None

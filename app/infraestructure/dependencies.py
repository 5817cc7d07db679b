from collections.abc import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import Depends, Request
from app.application.mappers.user_mapper import UserMapper
from app.application.usecases.create_user import CreateUserUseCase
from app.application.usecases.delete_user import DeleteUserUseCase
from app.application.usecases.get_all_users import GetAllUsersUseCase
from app.application.usecases.get_user_by_id import GetUserByIdUseCase
from app.application.usecases.update_user import UpdateUserUseCase
from app.domain.ports.user_repository import UserRepositoryPort
from app.infraestructure.repository.user_repository import UserRepository


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.session_factory() as session:
        yield session

# Injeta o repositório com o banco
def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepositoryPort:
    return UserRepository(db)

def get_user_mapper() -> UserMapper:
    return UserMapper()

# Injeta os casos de uso com o repositório e o mapper
def get_create_user_usecase(
    repo: UserRepositoryPort = Depends(get_user_repository),
    mapper: UserMapper = Depends(get_user_mapper),
) -> CreateUserUseCase:
    return CreateUserUseCase(repo, mapper)

def get_user_by_id_usecase(
    repo: UserRepositoryPort = Depends(get_user_repository),
    mapper: UserMapper = Depends(get_user_mapper),
) -> GetUserByIdUseCase:
    return GetUserByIdUseCase(repo, mapper)

def get_all_users_usecase(
    repo: UserRepositoryPort = Depends(get_user_repository),
    mapper: UserMapper = Depends(get_user_mapper),
) -> GetAllUsersUseCase:
    return GetAllUsersUseCase(repo, mapper)

def get_update_user_usecase(
    repo: UserRepositoryPort = Depends(get_user_repository),
    mapper: UserMapper = Depends(get_user_mapper),
) -> UpdateUserUseCase:
    return UpdateUserUseCase(repo, mapper)

def get_delete_user_usecase(repo: UserRepositoryPort = Depends(get_user_repository)) -> DeleteUserUseCase:
    return DeleteUserUseCase(repo)

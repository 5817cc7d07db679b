from collections.abc import AsyncIterator

from app.application.dtos.user import UserResponse
from app.application.mappers.user_mapper import UserMapper
from app.domain.ports.user_repository import UserRepositoryPort

class GetAllUsersUseCase:
    def __init__(self, repo: UserRepositoryPort, mapper: UserMapper):
        self.repo = repo
        self.mapper = mapper

    async def execute(self) -> AsyncIterator[UserResponse]:
        # Lista vazia é sucesso, não NotFound
        async for user in self.repo.find_all():
            yield self.mapper.to_response(user)

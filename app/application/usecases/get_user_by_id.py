from app.application.dtos.user import UserResponse
from app.application.mappers.user_mapper import UserMapper
from app.core.utils.result import AppError, NotFoundError, Result
from app.domain.ports.user_repository import UserRepositoryPort

class GetUserByIdUseCase:
    def __init__(self, repo: UserRepositoryPort, mapper: UserMapper):
        self.repo = repo
        self.mapper = mapper

    async def execute(self, id: str) -> Result[UserResponse, AppError]:
        user = await self.repo.find_by_id(id)

        if user is None:
            return Result.Err(NotFoundError())

        return Result.Ok(self.mapper.to_response(user))

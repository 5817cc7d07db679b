from app.core.utils.result import AppError, NotFoundError, Result
from app.domain.entities.user import User
from app.domain.ports.user_repository import UserRepositoryPort

class DeleteUserUseCase:
    def __init__(self, repo: UserRepositoryPort):
        self.repo = repo

    async def execute(self, id: str) -> Result[User, AppError]:
        removed = await self.repo.find_and_remove(id)

        if removed is None:
            return Result.Err(NotFoundError())

        return Result.Ok(removed)

import logging

from app.application.dtos.user import UserRequest, UserResponse
from app.application.mappers.user_mapper import UserMapper
from app.application.validators.user_request_validator import validate_user_request
from app.core.utils.result import AppError, NotFoundError, Result, ValidationError
from app.domain.ports.user_repository import UserRepositoryPort

logger = logging.getLogger(__name__)

class UpdateUserUseCase:
    def __init__(self, repo: UserRepositoryPort, mapper: UserMapper):
        self.repo = repo
        self.mapper = mapper

    async def execute(self, id: str, request: UserRequest) -> Result[UserResponse, AppError]:
        violations = validate_user_request(request, partial=True)
        if violations:
            logger.info("user.update.invalid", extra={"id": id, "fields": [v.field_name for v in violations]})
            return Result.Err(ValidationError(violations))

        current = await self.repo.find_by_id(id)
        if current is None:
            return Result.Err(NotFoundError())

        user = await self.repo.save(self.mapper.to_entity(request, current))
        return Result.Ok(self.mapper.to_response(user))

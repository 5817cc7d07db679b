import logging

from app.application.dtos.user import UserRequest, UserResponse
from app.application.mappers.user_mapper import UserMapper
from app.application.validators.user_request_validator import validate_user_request
from app.core.utils.result import AppError, Result, ValidationError
from app.domain.ports.user_repository import UserRepositoryPort

logger = logging.getLogger(__name__)

class CreateUserUseCase:
    def __init__(self, repo: UserRepositoryPort, mapper: UserMapper):
        self.repo = repo
        self.mapper = mapper

    async def execute(self, request: UserRequest) -> Result[UserResponse, AppError]:
        violations = validate_user_request(request)
        if violations:
            logger.info("user.create.invalid", extra={"fields": [v.field_name for v in violations]})
            return Result.Err(ValidationError(violations))

        user = await self.repo.insert(self.mapper.to_entity(request))
        return Result.Ok(self.mapper.to_response(user))

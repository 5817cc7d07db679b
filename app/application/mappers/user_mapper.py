from app.application.dtos.user import UserRequest, UserResponse
from app.domain.entities.user import User


class UserMapper:
    def to_entity(self, request: UserRequest, entity: User | None = None) -> User:
        if entity is None:
            return User(name=request.name, email=request.email, password=request.password)

        # Merge parcial: campos nulos no request mantêm o valor atual
        return User(
            id=entity.id,
            name=request.name if request.name is not None else entity.name,
            email=request.email if request.email is not None else entity.email,
            password=request.password if request.password is not None else entity.password,
        )

    def to_response(self, entity: User) -> UserResponse:
        return UserResponse(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            password=entity.password
        )

from pydantic import BaseModel, ConfigDict


class UserRequest(BaseModel):
    # Todos opcionais: o PATCH aceita payload parcial, o validador decide o que é obrigatório
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    id: str | None
    name: str
    email: str
    password: str

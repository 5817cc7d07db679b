from typing import List
from fastapi import APIRouter, Depends, Response, status
from app.application.dtos.user import UserRequest, UserResponse
from app.application.usecases.create_user import CreateUserUseCase
from app.application.usecases.delete_user import DeleteUserUseCase
from app.application.usecases.get_all_users import GetAllUsersUseCase
from app.application.usecases.get_user_by_id import GetUserByIdUseCase
from app.application.usecases.update_user import UpdateUserUseCase
from app.infraestructure.dependencies import (
    get_all_users_usecase,
    get_create_user_usecase,
    get_delete_user_usecase,
    get_update_user_usecase,
    get_user_by_id_usecase,
)

user_router = APIRouter(prefix="/users", tags=["users"])

@user_router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: UserRequest, usecase: CreateUserUseCase = Depends(get_create_user_usecase)):
    user = await usecase.execute(request)
    if user.is_err():
        raise user.error()
    return user.value()

@user_router.get("/{id}", response_model=UserResponse)
async def find_by_id(id: str, usecase: GetUserByIdUseCase = Depends(get_user_by_id_usecase)):
    user = await usecase.execute(id)
    if user.is_err():
        raise user.error()
    return user.value()

@user_router.get("", response_model=List[UserResponse])
async def find_all(usecase: GetAllUsersUseCase = Depends(get_all_users_usecase)):
    return [user async for user in usecase.execute()]

@user_router.patch("/{id}", response_model=UserResponse)
async def update_user(id: str, request: UserRequest, usecase: UpdateUserUseCase = Depends(get_update_user_usecase)):
    user = await usecase.execute(id, request)
    if user.is_err():
        raise user.error()
    return user.value()

@user_router.delete("/{id}")
async def delete_user(id: str, usecase: DeleteUserUseCase = Depends(get_delete_user_usecase)):
    removed = await usecase.execute(id)
    if removed.is_err():
        raise removed.error()
    return Response(status_code=status.HTTP_200_OK)

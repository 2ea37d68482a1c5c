from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, Depends, Response, status

from api_scaffold.api.deps import UserServiceProvider
from api_scaffold.api.schemas import ErrorResponse, UserCreateRequest, UserResponse
from api_scaffold.infra.repositories.user_repository import UserRecord
from api_scaffold.services.user_service import UserService


def _to_response(user: UserRecord) -> UserResponse:
    return UserResponse(id=user.id, email=user.email, name=user.name, created_at=user.created_at)


def build_router(
    get_user_service: UserServiceProvider,
    get_current_user: Callable[..., UserRecord],
) -> APIRouter:
    router = APIRouter(
        prefix="/users",
        tags=["users"],
        responses={404: {"model": ErrorResponse}},
    )

    @router.get("", response_model=list[UserResponse])
    def list_users(service: UserService = Depends(get_user_service)) -> list[UserResponse]:
        return [_to_response(user) for user in service.list_users()]

    @router.post(
        "",
        response_model=UserResponse,
        status_code=status.HTTP_201_CREATED,
        responses={409: {"model": ErrorResponse}},
    )
    def create_user(
        body: UserCreateRequest,
        service: UserService = Depends(get_user_service),
    ) -> UserResponse:
        return _to_response(service.create_user(email=body.email, name=body.name, password=body.password))

    @router.get("/me", response_model=UserResponse, responses={401: {"model": ErrorResponse}})
    def read_me(user: UserRecord = Depends(get_current_user)) -> UserResponse:
        return _to_response(user)

    @router.get("/{user_id}", response_model=UserResponse)
    def get_user(
        user_id: str,
        service: UserService = Depends(get_user_service),
    ) -> UserResponse:
        return _to_response(service.get_user(user_id))

    @router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_user(
        user_id: str,
        service: UserService = Depends(get_user_service),
    ) -> Response:
        service.delete_user(user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router

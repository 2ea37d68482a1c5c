from __future__ import annotations

from fastapi import APIRouter, Depends

from api_scaffold.api.deps import UserServiceProvider
from api_scaffold.api.schemas import ErrorResponse, TokenRequest, TokenResponse
from api_scaffold.services.auth import TokenService
from api_scaffold.services.user_service import UserService


def build_router(get_user_service: UserServiceProvider, tokens: TokenService) -> APIRouter:
    router = APIRouter(prefix="/auth", tags=["auth"])

    @router.post(
        "/token",
        response_model=TokenResponse,
        responses={401: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    )
    def issue_token(
        body: TokenRequest,
        service: UserService = Depends(get_user_service),
    ) -> TokenResponse:
        user = service.authenticate(body.email, body.password)
        return TokenResponse(access_token=tokens.issue(user.id))

    return router

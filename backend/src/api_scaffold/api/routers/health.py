from __future__ import annotations

from fastapi import APIRouter

from api_scaffold.api.schemas import HealthResponse
from api_scaffold.settings import Settings


def build_router(settings: Settings) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(version=settings.app_version)

    return router
